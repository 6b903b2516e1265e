"""Conversion of validated settings into immutable domain metadata."""

from devsecops_app.domain import APPLICATION_NAME, SecurityPosture, ServiceMetadata

from .settings import AppSettings


def config_build_service_metadata(settings: AppSettings) -> ServiceMetadata:
    """Resolve identity metadata once from startup settings.

    Args:
        settings: Validated application settings.

    Returns:
        ServiceMetadata: Metadata embedded into health and info responses.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    return ServiceMetadata(
        application_name=APPLICATION_NAME,
        version=settings.application_version,
        build=settings.build_number,
        commit=settings.git_commit,
        environment_name=settings.environment_name,
    )


def config_build_security_posture(settings: AppSettings) -> SecurityPosture:
    """Resolve the security pipeline summary from startup settings.

    Args:
        settings: Validated application settings.

    Returns:
        SecurityPosture: Posture reported by the root document.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    return SecurityPosture(
        scanning_enabled=settings.security_scanning_enabled,
        tools=tuple(settings.security_tools),
        gates_enforced=settings.security_gates_enforced,
    )
