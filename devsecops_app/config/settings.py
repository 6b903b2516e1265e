"""Typed runtime settings with dotenv support and startup validation."""

from typing import Annotated

from pydantic import AliasChoices, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SECURITY_TOOLS = ("gitleaks", "trivy", "semgrep", "checkov", "hadolint")
LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the introspection service runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `build_number` reads from `BUILD_NUMBER`. Some fields also
    accept a short alias such as `PORT` for `application_port`.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port.
        application_version: Version string reported by health and info surfaces.
        environment_name: Runtime environment label.
        build_number: CI build identifier.
        git_commit: Source commit identifier.
        log_level: Root level for the service logger.
        shutdown_grace_seconds: Deadline for draining in-flight requests on shutdown.
        security_scanning_enabled: Whether the pipeline security scanning is reported as enabled.
        security_gates_enforced: Whether the pipeline security gates are reported as enforced.
        security_tools: Scanner identifiers reported by the root document.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("application_port", "port"),
    )
    application_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("application_version", "app_version"),
    )
    environment_name: str = Field(
        default="development",
        validation_alias=AliasChoices("environment_name", "app_env"),
    )
    build_number: str = Field(default="local")
    git_commit: str = Field(default="unknown")
    log_level: str = Field(default="INFO")
    shutdown_grace_seconds: int = Field(default=10, ge=0)
    security_scanning_enabled: bool = Field(default=True)
    security_gates_enforced: bool = Field(default=True)
    security_tools: Annotated[tuple[str, ...], NoDecode] = Field(default=DEFAULT_SECURITY_TOOLS)

    @field_validator(
        "application_host",
        "application_version",
        "environment_name",
        "build_number",
        "git_commit",
        mode="before",
    )
    @classmethod
    def _fallback_blank_to_default(cls, value: object, info: ValidationInfo) -> object:
        if isinstance(value, str):
            stripped_value = value.strip()
            if not stripped_value:
                return cls.model_fields[info.field_name].default
            return stripped_value
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in LOG_LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVEL_NAMES)}")
        return normalized_value

    @field_validator("security_tools", mode="before")
    @classmethod
    def _split_security_tools(cls, value: object) -> object:
        if isinstance(value, str):
            tools = tuple(tool.strip() for tool in value.split(",") if tool.strip())
            return tools or DEFAULT_SECURITY_TOOLS
        return value


def config_load_settings(**overrides: object) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        **overrides: Field values taking precedence over environment and dotenv,
            such as command line overrides.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
