"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
On SIGTERM or SIGINT uvicorn stops accepting connections, drains in-flight
requests up to the configured grace period, and the process exits with
status 0.
"""

import argparse
import logging
import signal
import sys
from types import FrameType

import uvicorn

from devsecops_app.bootstrap import bootstrap_create_application
from devsecops_app.config import SettingsLoadError, config_load_settings

logger = logging.getLogger(__name__)

EXIT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def main_parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line overrides for the bind address.

    Args:
        argv: Argument list without program name. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: Parsed `host` and `port` overrides, `None` when absent.
    """

    argument_parser = argparse.ArgumentParser(description="DevSecOps sample service runtime entrypoint")
    argument_parser.add_argument("--host", dest="host", type=str, help="Override APPLICATION_HOST")
    argument_parser.add_argument("--port", dest="port", type=int, help="Override APPLICATION_PORT / PORT")
    return argument_parser.parse_args(argv)


def main_handle_exit_signal(signal_number: int, _frame: FrameType | None) -> None:
    """Exit cleanly once the server has finished draining.

    uvicorn installs its own handlers while serving and re-raises a captured
    signal after shutdown, so this handler runs only after the drain.

    Args:
        signal_number: Received signal number.
        _frame: Interrupted stack frame.

    Raises:
        SystemExit: Always raised with status 0.
    """

    logger.info("%s received, exiting after drain", signal.Signals(signal_number).name)
    raise SystemExit(0)


def main_install_exit_handlers() -> None:
    for exit_signal in EXIT_SIGNALS:
        signal.signal(exit_signal, main_handle_exit_signal)


def main(argv: list[str] | None = None) -> None:
    """Run the HTTP server with validated startup configuration.

    Args:
        argv: Optional argument list, mainly for tests.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails.
    """

    parsed_arguments = main_parse_arguments(argv)
    overrides: dict[str, object] = {}
    if parsed_arguments.host is not None:
        overrides["application_host"] = parsed_arguments.host
    if parsed_arguments.port is not None:
        overrides["application_port"] = parsed_arguments.port

    try:
        settings = config_load_settings(**overrides)
    except SettingsLoadError as error:
        print(str(error), file=sys.stderr)
        raise SystemExit(1) from error

    application = bootstrap_create_application(settings)
    main_install_exit_handlers()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
