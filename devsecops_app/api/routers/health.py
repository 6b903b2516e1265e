"""Health endpoint router composition for liveness and readiness checks."""

import logging
from collections.abc import Sequence

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from devsecops_app.domain import ServiceMetadata
from devsecops_app.domain.endpoints import ENDPOINT_HEALTH
from devsecops_app.runtime import ProcessStatsPort, ReadinessCheckPort

logger = logging.getLogger(__name__)


def api_create_health_router(
    metadata: ServiceMetadata,
    process_stats: ProcessStatsPort,
    readiness_checks: Sequence[ReadinessCheckPort] = (),
) -> APIRouter:
    """Create health-check router with optional dependency readiness checks.

    Without readiness checks the endpoint reports liveness only and always
    answers `healthy`.

    Args:
        metadata: Identity metadata resolved at startup.
        process_stats: Process stats port used for the response timestamp.
        readiness_checks: Dependency checks evaluated on every request.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when metadata or process_stats is invalid.
    """

    if metadata is None:
        raise ValueError("metadata must not be None")
    if process_stats is None:
        raise ValueError("process_stats must not be None")

    checks = tuple(readiness_checks)
    router = APIRouter(tags=["health"])

    @router.get(ENDPOINT_HEALTH)
    def api_health_status() -> JSONResponse:
        """Return service health state.

        Returns:
            JSONResponse: 200 `healthy` payload, or 503 `degraded` when a
            readiness check reports its dependency unavailable.
        """

        payload = {
            "status": "healthy",
            "timestamp": process_stats.runtime_utc_timestamp(),
            "version": metadata.version,
            "environment": metadata.environment_name,
        }
        if not checks:
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

        check_results: dict[str, dict[str, str]] = {}
        degraded = False
        for check in checks:
            check_name = check.runtime_check_name()
            try:
                check_health = check.runtime_check_health()
                check_results[check_name] = {"status": check_health.status, "detail": check_health.detail}
            except ConnectionError as error:
                logger.warning("Readiness check %s failed: %s", check_name, error)
                check_results[check_name] = {"status": "down", "detail": str(error)}
                degraded = True

        payload["checks"] = check_results
        if degraded:
            payload["status"] = "degraded"
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
