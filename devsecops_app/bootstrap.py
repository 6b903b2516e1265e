"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from devsecops_app.api import create_api_application
from devsecops_app.config import AppSettings, config_configure_logging, config_load_settings
from devsecops_app.runtime import HostProcessStatsService


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings. Loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    config_configure_logging(resolved_settings.log_level)
    process_stats = HostProcessStatsService()
    return create_api_application(settings=resolved_settings, process_stats=process_stats)
