"""Configuration package for runtime settings, logging and startup validation."""

from .log_setup import config_configure_logging
from .metadata import config_build_security_posture, config_build_service_metadata
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "config_build_security_posture",
    "config_build_service_metadata",
    "config_configure_logging",
    "config_load_settings",
]
