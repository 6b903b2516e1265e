"""Shared pytest fixtures for service tests."""

from __future__ import annotations

import pytest

SERVICE_ENVIRONMENT_VARIABLES = (
    "APPLICATION_HOST",
    "APPLICATION_PORT",
    "PORT",
    "APPLICATION_VERSION",
    "APP_VERSION",
    "ENVIRONMENT_NAME",
    "APP_ENV",
    "BUILD_NUMBER",
    "GIT_COMMIT",
    "LOG_LEVEL",
    "SHUTDOWN_GRACE_SECONDS",
    "SECURITY_SCANNING_ENABLED",
    "SECURITY_GATES_ENFORCED",
    "SECURITY_TOOLS",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear service environment variables and any local dotenv file.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Temporary working directory without a `.env` file.

    Returns:
        None: Environment is isolated for the duration of one test.
    """

    for variable_name in SERVICE_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)
