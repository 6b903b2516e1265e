"""FastAPI application factory for the introspection service.

This module composes routers, error handlers and lifecycle logging.
"""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI

from devsecops_app.config import AppSettings, config_build_security_posture, config_build_service_metadata
from devsecops_app.domain import AVAILABLE_ENDPOINTS
from devsecops_app.runtime import ProcessStatsPort, ReadinessCheckPort

from .errors import api_register_error_handlers
from .routers import (
    api_create_health_router,
    api_create_info_router,
    api_create_metrics_router,
    api_create_root_router,
)

logger = logging.getLogger(__name__)


def create_api_application(
    settings: AppSettings,
    process_stats: ProcessStatsPort,
    readiness_checks: Sequence[ReadinessCheckPort] = (),
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        process_stats: Process stats port used by health, info and metrics endpoints.
        readiness_checks: Optional dependency checks evaluated by `/health`.

    Returns:
        FastAPI: Framework application exposing exactly the introspection routes.

    Raises:
        ValueError: Raised when settings or process_stats is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if process_stats is None:
        raise ValueError("process_stats must not be None")

    metadata = config_build_service_metadata(settings)
    security_posture = config_build_security_posture(settings)

    @asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        base_url = f"http://localhost:{settings.application_port}"
        logger.info("%s listening on port %s", metadata.application_name, settings.application_port)
        for endpoint in AVAILABLE_ENDPOINTS[1:]:
            logger.info("Endpoint available: %s%s", base_url, endpoint)
        yield
        logger.info("%s stopped after draining in-flight requests", metadata.application_name)

    application = FastAPI(
        title=metadata.application_name,
        version=metadata.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=api_lifespan,
        redirect_slashes=False,
    )
    api_register_error_handlers(application)

    application.include_router(api_create_root_router(security_posture=security_posture))
    application.include_router(
        api_create_health_router(
            metadata=metadata,
            process_stats=process_stats,
            readiness_checks=readiness_checks,
        )
    )
    application.include_router(api_create_info_router(metadata=metadata, process_stats=process_stats))
    application.include_router(api_create_metrics_router(process_stats=process_stats))

    return application
