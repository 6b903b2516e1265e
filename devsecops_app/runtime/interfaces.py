"""Typed interfaces for process introspection and readiness checks.

All host runtime reads must stay behind these ports so handlers can be
tested against deterministic fakes.
"""

from typing import Protocol

from devsecops_app.domain import HealthStatus, ProcessSnapshot


class ProcessStatsPort(Protocol):
    """Port definition for reading live process vitals."""

    def runtime_collect_snapshot(self) -> ProcessSnapshot:
        """Read a fresh snapshot of process vitals.

        Returns:
            ProcessSnapshot: Uptime, memory, CPU and timestamp at call time.
        """

    def runtime_utc_timestamp(self) -> str:
        """Return the current wall-clock time as an ISO-8601 UTC string.

        Returns:
            str: Timestamp such as `2026-10-19T12:00:00.000Z`.
        """


class ReadinessCheckPort(Protocol):
    """Port definition for one dependency readiness check."""

    def runtime_check_name(self) -> str:
        """Return a stable label for the checked dependency.

        Returns:
            str: Check label used as key in health payloads.
        """

    def runtime_check_health(self) -> HealthStatus:
        """Verify the dependency and return its health payload.

        Returns:
            HealthStatus: Check status payload.

        Raises:
            ConnectionError: Raised when the dependency is unavailable.
        """
