"""Metrics endpoint router composition for raw process vitals."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from devsecops_app.domain.endpoints import ENDPOINT_METRICS
from devsecops_app.runtime import ProcessStatsPort


def api_create_metrics_router(process_stats: ProcessStatsPort) -> APIRouter:
    """Create metrics router exposing uptime, memory and CPU counters.

    Args:
        process_stats: Process stats port queried per request.

    Returns:
        APIRouter: Router exposing `/metrics` endpoint.

    Raises:
        ValueError: Raised when process_stats is invalid.
    """

    if process_stats is None:
        raise ValueError("process_stats must not be None")

    router = APIRouter(tags=["introspection"])

    @router.get(ENDPOINT_METRICS)
    def api_metrics_snapshot() -> JSONResponse:
        snapshot = process_stats.runtime_collect_snapshot()
        payload = {
            "uptime": snapshot.uptime_seconds,
            "memory": snapshot.memory.domain_to_payload(),
            "cpu": snapshot.cpu.domain_to_payload(),
            "timestamp": snapshot.timestamp,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
