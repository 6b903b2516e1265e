"""Tests for the host-backed process stats service."""

from __future__ import annotations

import re
import sys
import time
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from devsecops_app.domain import ServiceMetadata
from devsecops_app.runtime import HostProcessStatsService, runtime_format_timestamp

ISO_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class _FakeProcess:
    """Test double exposing the psutil process counters used by the service."""

    def __init__(self, created_seconds_ago: float = 100.0, **memory_fields: int):
        self._create_time = time.time() - created_seconds_ago
        self._memory_fields = memory_fields or {"rss": 1_000_000, "vms": 8_000_000}

    def create_time(self) -> float:
        return self._create_time

    def memory_info(self) -> SimpleNamespace:
        return SimpleNamespace(**self._memory_fields)

    def cpu_times(self) -> SimpleNamespace:
        return SimpleNamespace(user=1.5, system=0.25)


def test_runtime_format_timestamp_renders_milliseconds_and_z_suffix() -> None:
    moment = datetime(2026, 10, 19, 12, 30, 45, 123456, tzinfo=timezone.utc)

    assert runtime_format_timestamp(moment) == "2026-10-19T12:30:45.123Z"


def test_runtime_format_timestamp_converts_offsets_and_naive_values() -> None:
    """Normalize offset-aware values to UTC and treat naive values as UTC.

    Returns:
        None: Assertions validate normalization.

    Raises:
        AssertionError: Raised when conversion is wrong.
    """

    offset_moment = datetime(2026, 10, 19, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    naive_moment = datetime(2026, 10, 19, 12, 0, 0)

    assert runtime_format_timestamp(offset_moment) == "2026-10-19T12:00:00.000Z"
    assert runtime_format_timestamp(naive_moment) == "2026-10-19T12:00:00.000Z"


def test_runtime_collect_snapshot_reads_live_process_counters() -> None:
    """Return positive memory figures, CPU times and host identity.

    Returns:
        None: Assertions validate snapshot contents.

    Raises:
        AssertionError: Raised when counters are missing or invalid.
    """

    snapshot = HostProcessStatsService().runtime_collect_snapshot()

    assert snapshot.uptime_seconds >= 0
    assert snapshot.memory.rss > 0
    assert snapshot.memory.vms > 0
    assert snapshot.memory.max_rss >= snapshot.memory.rss
    assert snapshot.cpu.user >= 0
    assert snapshot.cpu.system >= 0
    assert ISO_TIMESTAMP_PATTERN.match(snapshot.timestamp)
    assert snapshot.platform == sys.platform
    assert snapshot.runtime_version.startswith(f"{sys.version_info.major}.{sys.version_info.minor}")


def test_runtime_collect_snapshot_uses_injected_clocks() -> None:
    """Compute uptime and timestamp from injected clocks.

    Returns:
        None: Assertions validate deterministic clock usage.

    Raises:
        AssertionError: Raised when real clocks leak into the snapshot.
    """

    monotonic_values = iter([105.5, 110.0])
    service = HostProcessStatsService(
        started_monotonic=100.0,
        monotonic_clock=lambda: next(monotonic_values),
        wall_clock=lambda: datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )

    first_snapshot = service.runtime_collect_snapshot()
    second_snapshot = service.runtime_collect_snapshot()

    assert first_snapshot.uptime_seconds == 5.5
    assert second_snapshot.uptime_seconds == 10.0
    assert first_snapshot.timestamp == "2026-01-02T03:04:05.000Z"
    assert service.runtime_utc_timestamp() == "2026-01-02T03:04:05.000Z"


def test_runtime_collect_snapshot_never_reports_negative_uptime() -> None:
    service = HostProcessStatsService(started_monotonic=50.0, monotonic_clock=lambda: 40.0)

    assert service.runtime_collect_snapshot().uptime_seconds == 0.0


def test_runtime_process_stats_rejects_missing_clock() -> None:
    with pytest.raises(ValueError, match="monotonic_clock"):
        HostProcessStatsService(monotonic_clock=None)


def test_domain_service_metadata_rejects_blank_fields() -> None:
    """Refuse metadata with an empty identity field.

    Returns:
        None: Assertions validate the non-empty invariant.

    Raises:
        AssertionError: Raised when blank metadata is accepted.
    """

    with pytest.raises(ValueError, match="commit"):
        ServiceMetadata(
            application_name="DevSecOps Sample App",
            version="1.0.0",
            build="local",
            commit="",
            environment_name="development",
        )


def test_runtime_collect_snapshot_reports_current_rss_and_cpu_from_psutil() -> None:
    """Report current resident memory and CPU times from the process handle.

    Returns:
        None: Assertions validate counter mapping.

    Raises:
        AssertionError: Raised when peak memory is reported as current memory.
    """

    service = HostProcessStatsService(process=_FakeProcess(rss=1_000_000, vms=8_000_000))

    snapshot = service.runtime_collect_snapshot()

    assert snapshot.memory.rss == 1_000_000
    assert snapshot.memory.vms == 8_000_000
    assert snapshot.memory.max_rss >= snapshot.memory.rss
    assert snapshot.cpu.user == 1_500_000
    assert snapshot.cpu.system == 250_000


def test_runtime_collect_snapshot_uses_peak_working_set_when_exposed() -> None:
    service = HostProcessStatsService(process=_FakeProcess(rss=1_000, vms=2_000, peak_wset=3_000))

    assert service.runtime_collect_snapshot().memory.max_rss == 3_000


def test_runtime_uptime_starts_at_process_creation() -> None:
    """Measure uptime from the process creation time, not service construction.

    Returns:
        None: Assertions validate the uptime origin.

    Raises:
        AssertionError: Raised when uptime starts at construction time.
    """

    service = HostProcessStatsService(process=_FakeProcess(created_seconds_ago=100.0))

    uptime_seconds = service.runtime_collect_snapshot().uptime_seconds

    assert 100.0 <= uptime_seconds < 160.0
