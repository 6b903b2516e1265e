"""Runtime package for host process introspection boundaries."""

from .interfaces import ProcessStatsPort, ReadinessCheckPort
from .process_stats import HostProcessStatsService, runtime_format_timestamp

__all__ = [
    "HostProcessStatsService",
    "ProcessStatsPort",
    "ReadinessCheckPort",
    "runtime_format_timestamp",
]
