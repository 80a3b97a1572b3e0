"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Optional, Sequence

import pytest

from cassandra_health.core.diagnostics import (
    DiagnosticStatus,
    TokenRingDiagnostic,
    TopologyDiagnostic,
)


class FakeConnection:
    """In-memory cluster connection that records the calls it receives."""

    def __init__(
        self,
        topology: DiagnosticStatus = DiagnosticStatus.AVAILABLE,
        ring: Optional[DiagnosticStatus] = None,
        keyspace: Optional[str] = None,
        default_consistency_level: str = "LOCAL_ONE",
        local_datacenter: Optional[str] = "dc1",
        row: Optional[Sequence[Any]] = ("4.0.1",),
        error: Optional[Exception] = None,
        ring_error: Optional[Exception] = None,
    ) -> None:
        self.topology = topology
        self.ring = ring
        self._keyspace = keyspace
        self._default_consistency_level = default_consistency_level
        self._local_datacenter = local_datacenter
        self.row = row
        self.error = error
        self.ring_error = ring_error
        self.ring_calls: list[tuple[str, str, Optional[str]]] = []
        self.queries: list[tuple[str, str]] = []
        self.closed = False

    def close(self) -> None:
        self.closed = True

    @property
    def keyspace(self) -> Optional[str]:
        return self._keyspace

    def default_consistency_level(self) -> str:
        return self._default_consistency_level

    def negotiated_local_datacenter(self) -> Optional[str]:
        return self._local_datacenter

    def topology_diagnostic(self) -> TopologyDiagnostic:
        if self.error:
            raise self.error
        return TopologyDiagnostic(
            status=self.topology,
            details={"status": self.topology.value, "total": 3},
        )

    def token_ring_diagnostic(
        self, keyspace: str, consistency_level: str, datacenter: Optional[str]
    ) -> TokenRingDiagnostic:
        self.ring_calls.append((keyspace, consistency_level, datacenter))
        if self.ring_error:
            raise self.ring_error
        status = self.ring or DiagnosticStatus.AVAILABLE
        return TokenRingDiagnostic(
            status=status,
            keyspace=keyspace,
            consistency_level=consistency_level,
            details={"status": status.value, "keyspace": keyspace},
            datacenter=datacenter,
        )

    def execute(self, statement: str, consistency_level: str) -> Optional[Sequence[Any]]:
        self.queries.append((statement, consistency_level))
        if self.error:
            raise self.error
        return self.row


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def make_connection() -> Callable[..., FakeConnection]:
    return FakeConnection
