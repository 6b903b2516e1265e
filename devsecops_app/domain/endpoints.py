"""Static endpoint catalogue and fixed response texts."""

from typing import Final

APPLICATION_NAME: Final = "DevSecOps Sample App"
ROOT_MESSAGE: Final = "🚀 DevSecOps Sample Application"
ROOT_DESCRIPTION: Final = "A sample application demonstrating DevSecOps CI/CD pipeline with security scanning"

ENDPOINT_ROOT: Final = "/"
ENDPOINT_HEALTH: Final = "/health"
ENDPOINT_INFO: Final = "/info"
ENDPOINT_METRICS: Final = "/metrics"

AVAILABLE_ENDPOINTS: Final = (ENDPOINT_ROOT, ENDPOINT_HEALTH, ENDPOINT_INFO, ENDPOINT_METRICS)

NOT_FOUND_ERROR: Final = "Not Found"
NOT_FOUND_MESSAGE: Final = "The requested endpoint does not exist"
SERVER_ERROR: Final = "Internal Server Error"
SERVER_ERROR_MESSAGE: Final = "Something went wrong!"
