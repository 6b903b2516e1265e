"""Domain models used across application layer boundaries."""

from .endpoints import AVAILABLE_ENDPOINTS, APPLICATION_NAME
from .models import CpuUsage, HealthStatus, MemoryUsage, ProcessSnapshot, SecurityPosture, ServiceMetadata

__all__ = [
    "APPLICATION_NAME",
    "AVAILABLE_ENDPOINTS",
    "CpuUsage",
    "HealthStatus",
    "MemoryUsage",
    "ProcessSnapshot",
    "SecurityPosture",
    "ServiceMetadata",
]
