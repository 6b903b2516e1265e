"""Process stats service backed by psutil process counters."""

import platform
import sys
import time
from collections.abc import Callable
from datetime import datetime, timezone

import psutil

from devsecops_app.domain import CpuUsage, MemoryUsage, ProcessSnapshot

from .interfaces import ProcessStatsPort

if sys.platform != "win32":
    import resource


def runtime_format_timestamp(moment: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Aware or naive datetime; naive values are treated as UTC.

    Returns:
        str: Timestamp with a trailing `Z`, e.g. `2026-10-19T12:00:00.000Z`.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HostProcessStatsService(ProcessStatsPort):
    """Process stats service reading the current interpreter process."""

    def __init__(
        self,
        process: psutil.Process | None = None,
        started_monotonic: float | None = None,
        monotonic_clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] | None = None,
    ):
        """Initialize process stats service.

        Args:
            process: psutil handle of the observed process. Defaults to the current process.
            started_monotonic: Monotonic instant treated as process start.
                Defaults to the process creation time reported by psutil.
            monotonic_clock: Clock used for uptime computation.
            wall_clock: Clock used for timestamps. Defaults to UTC now.

        Raises:
            ValueError: Raised when monotonic_clock is None.
            psutil.Error: Raised when the process cannot be inspected.
        """

        if monotonic_clock is None:
            raise ValueError("monotonic_clock must not be None")
        self._process = process or psutil.Process()
        self._monotonic_clock = monotonic_clock
        if started_monotonic is None:
            # Map the epoch creation time onto the monotonic clock once.
            elapsed_since_creation = max(0.0, time.time() - self._process.create_time())
            started_monotonic = monotonic_clock() - elapsed_since_creation
        self._started_monotonic = started_monotonic
        self._wall_clock = wall_clock or (lambda: datetime.now(timezone.utc))

    def runtime_utc_timestamp(self) -> str:
        return runtime_format_timestamp(self._wall_clock())

    def runtime_collect_snapshot(self) -> ProcessSnapshot:
        """Read uptime, memory and CPU counters of the observed process.

        Returns:
            ProcessSnapshot: Fresh snapshot for one response.

        Raises:
            psutil.Error: Raised when host counters cannot be read.
        """

        uptime_seconds = max(0.0, self._monotonic_clock() - self._started_monotonic)
        return ProcessSnapshot(
            uptime_seconds=uptime_seconds,
            memory=self._runtime_read_memory(),
            cpu=self._runtime_read_cpu(),
            timestamp=self.runtime_utc_timestamp(),
            platform=sys.platform,
            runtime_version=platform.python_version(),
        )

    def _runtime_read_memory(self) -> MemoryUsage:
        memory_info = self._process.memory_info()
        return MemoryUsage(
            rss=memory_info.rss,
            vms=memory_info.vms,
            max_rss=max(memory_info.rss, self._runtime_read_peak_rss(memory_info)),
        )

    @staticmethod
    def _runtime_read_peak_rss(memory_info) -> int:
        # Windows exposes the peak working set; POSIX reports it via getrusage.
        peak_working_set = getattr(memory_info, "peak_wset", None)
        if peak_working_set is not None:
            return peak_working_set
        if sys.platform == "win32":
            return memory_info.rss
        max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # ru_maxrss is bytes on macOS and kilobytes elsewhere.
        if sys.platform != "darwin":
            max_rss *= 1024
        return max_rss

    def _runtime_read_cpu(self) -> CpuUsage:
        cpu_times = self._process.cpu_times()
        return CpuUsage(
            user=int(cpu_times.user * 1_000_000),
            system=int(cpu_times.system * 1_000_000),
        )
