"""Cluster diagnostic types and status merging."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class DiagnosticStatus(str, Enum):
    """Availability reported by a cluster diagnostic."""

    AVAILABLE = "AVAILABLE"
    PARTIALLY_AVAILABLE = "PARTIALLY_AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def merge_with(self, other: Optional["DiagnosticStatus"]) -> "DiagnosticStatus":
        """Return the worse of the two statuses."""
        if other is None:
            return self
        return other if other.severity > self.severity else self


_SEVERITY = {
    DiagnosticStatus.AVAILABLE: 0,
    DiagnosticStatus.PARTIALLY_AVAILABLE: 1,
    DiagnosticStatus.UNAVAILABLE: 2,
}


def merge_status(
    topology: DiagnosticStatus,
    ring: Optional[DiagnosticStatus] = None,
) -> DiagnosticStatus:
    return topology.merge_with(ring)


@dataclass(frozen=True)
class TopologyDiagnostic:
    """Reachability of the nodes known to the driver."""

    status: DiagnosticStatus
    details: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TokenRingDiagnostic:
    """Replica availability of every token range of a keyspace."""

    status: DiagnosticStatus
    keyspace: str
    consistency_level: str
    details: Mapping[str, Any] = field(default_factory=dict)
    datacenter: Optional[str] = None
