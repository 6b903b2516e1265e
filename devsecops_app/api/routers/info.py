"""Info endpoint router composition for service identity and process vitals."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from devsecops_app.domain import ServiceMetadata
from devsecops_app.domain.endpoints import ENDPOINT_INFO
from devsecops_app.runtime import ProcessStatsPort


def api_create_info_router(metadata: ServiceMetadata, process_stats: ProcessStatsPort) -> APIRouter:
    """Create info router merging identity metadata with a fresh snapshot.

    Args:
        metadata: Identity metadata resolved at startup.
        process_stats: Process stats port queried per request.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if metadata is None:
        raise ValueError("metadata must not be None")
    if process_stats is None:
        raise ValueError("process_stats must not be None")

    router = APIRouter(tags=["introspection"])

    @router.get(ENDPOINT_INFO)
    def api_info_details() -> JSONResponse:
        """Return identity fields and current process vitals.

        Returns:
            JSONResponse: Info payload.

        Raises:
            OSError: Raised when host counters cannot be read.
        """

        snapshot = process_stats.runtime_collect_snapshot()
        payload = {
            "application": metadata.application_name,
            "version": metadata.version,
            "build": metadata.build,
            "commit": metadata.commit,
            "environment": metadata.environment_name,
            "uptime": snapshot.uptime_seconds,
            "memory": snapshot.memory.domain_to_payload(),
            "platform": snapshot.platform,
            # Wire name kept for existing dashboards; value is the Python version.
            "nodeVersion": snapshot.runtime_version,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
