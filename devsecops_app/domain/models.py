"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the introspection surfaces.
Serialization helpers render the camelCase wire names used by the HTTP
responses.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ServiceMetadata:
    """Identity metadata resolved once at startup.

    Attributes:
        application_name: Human-readable app name.
        version: Application version string.
        build: CI build identifier.
        commit: Source commit identifier.
        environment_name: Runtime environment label.
    """

    application_name: str
    version: str
    build: str
    commit: str
    environment_name: str

    def __post_init__(self) -> None:
        for field_name in ("application_name", "version", "build", "commit", "environment_name"):
            if not getattr(self, field_name):
                raise ValueError(f"{field_name} must not be blank")


@dataclass(frozen=True)
class SecurityPosture:
    """Security pipeline summary reported by the root document.

    Attributes:
        scanning_enabled: Whether security scanning runs in the pipeline.
        tools: Scanner identifiers.
        gates_enforced: Whether failed scans block the pipeline.
    """

    scanning_enabled: bool
    tools: tuple[str, ...]
    gates_enforced: bool

    def domain_to_payload(self) -> dict[str, Any]:
        """Render posture as the wire document.

        Returns:
            dict[str, Any]: `{scanning, tools, gates}` payload.
        """

        return {
            "scanning": "enabled" if self.scanning_enabled else "disabled",
            "tools": list(self.tools),
            "gates": "enforced" if self.gates_enforced else "advisory",
        }


@dataclass(frozen=True)
class MemoryUsage:
    """Process memory figures in bytes.

    Attributes:
        rss: Current resident set size.
        vms: Current virtual memory size.
        max_rss: Peak resident set size since process start.
    """

    rss: int
    vms: int
    max_rss: int

    def domain_to_payload(self) -> dict[str, int]:
        return {"rss": self.rss, "vms": self.vms, "maxRss": self.max_rss}


@dataclass(frozen=True)
class CpuUsage:
    """Cumulative process CPU time in microseconds.

    Attributes:
        user: Time spent in user mode.
        system: Time spent in kernel mode.
    """

    user: int
    system: int

    def domain_to_payload(self) -> dict[str, int]:
        return {"user": self.user, "system": self.system}


@dataclass(frozen=True)
class ProcessSnapshot:
    """Point-in-time readout of process vitals.

    Attributes:
        uptime_seconds: Seconds elapsed since process start.
        memory: Memory figures.
        cpu: CPU time figures.
        timestamp: ISO-8601 UTC capture time.
        platform: Host platform identifier.
        runtime_version: Interpreter version string.
    """

    uptime_seconds: float
    memory: MemoryUsage
    cpu: CpuUsage
    timestamp: str
    platform: str
    runtime_version: str


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by readiness checks.

    Attributes:
        status: Overall status text for the check.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
