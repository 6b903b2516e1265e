"""Application-level error handlers for unknown routes and handler faults."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from devsecops_app.domain.endpoints import (
    AVAILABLE_ENDPOINTS,
    NOT_FOUND_ERROR,
    NOT_FOUND_MESSAGE,
    SERVER_ERROR,
    SERVER_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

# A known path with the wrong method is answered like an unknown path.
_NOT_FOUND_STATUS_CODES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


def api_not_found_payload() -> dict[str, object]:
    """Return the route-not-found document.

    Returns:
        dict[str, object]: Payload independent of the requested path.
    """

    return {
        "error": NOT_FOUND_ERROR,
        "message": NOT_FOUND_MESSAGE,
        "availableEndpoints": list(AVAILABLE_ENDPOINTS),
    }


async def api_handle_http_exception(request: Request, error: StarletteHTTPException) -> Response:
    """Map framework routing errors to the not-found document.

    Args:
        request: Inbound request.
        error: Framework HTTP exception.

    Returns:
        Response: 404 not-found document, or the framework default for other codes.
    """

    if error.status_code in _NOT_FOUND_STATUS_CODES:
        logger.debug("No route for %s %s", request.method, request.url.path)
        return JSONResponse(content=api_not_found_payload(), status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, error)


async def api_handle_unexpected_error(request: Request, error: Exception) -> JSONResponse:
    """Log a handler fault and return the generic server error document.

    Args:
        request: Inbound request.
        error: Unhandled exception raised while building the response.

    Returns:
        JSONResponse: 500 payload without any exception detail.
    """

    logger.error("Unhandled error while serving %s %s", request.method, request.url.path, exc_info=error)
    return JSONResponse(
        content={"error": SERVER_ERROR, "message": SERVER_ERROR_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def api_register_error_handlers(application: FastAPI) -> None:
    """Attach not-found and fault handlers to the application.

    Args:
        application: Application to configure.

    Raises:
        ValueError: Raised when application is None.
    """

    if application is None:
        raise ValueError("application must not be None")
    application.add_exception_handler(StarletteHTTPException, api_handle_http_exception)
    application.add_exception_handler(Exception, api_handle_unexpected_error)
