"""Root endpoint router composition for the service welcome document."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from devsecops_app.domain import SecurityPosture
from devsecops_app.domain.endpoints import (
    ENDPOINT_HEALTH,
    ENDPOINT_INFO,
    ENDPOINT_METRICS,
    ENDPOINT_ROOT,
    ROOT_DESCRIPTION,
    ROOT_MESSAGE,
)


def api_create_root_router(security_posture: SecurityPosture) -> APIRouter:
    """Create root router describing the service and its security posture.

    Args:
        security_posture: Security pipeline summary resolved at startup.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when security_posture is invalid.
    """

    if security_posture is None:
        raise ValueError("security_posture must not be None")

    payload = {
        "message": ROOT_MESSAGE,
        "description": ROOT_DESCRIPTION,
        "endpoints": {
            "health": ENDPOINT_HEALTH,
            "metrics": ENDPOINT_METRICS,
            "info": ENDPOINT_INFO,
        },
        "security": security_posture.domain_to_payload(),
    }

    router = APIRouter(tags=["foundation"])

    @router.get(ENDPOINT_ROOT)
    def api_root_index() -> JSONResponse:
        """Return the static welcome document.

        Returns:
            JSONResponse: Welcome payload, identical across calls.
        """

        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
