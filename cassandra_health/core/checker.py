"""Checkers that turn cluster diagnostics into health reports."""

import logging
from typing import Any, Optional, Protocol

from cassandra_health.config import CheckConfig
from cassandra_health.core.connection import ClusterConnection
from cassandra_health.core.diagnostics import (
    DiagnosticStatus,
    TokenRingDiagnostic,
    merge_status,
)
from cassandra_health.core.errors import ConfigurationUnresolvable, MalformedResult
from cassandra_health.core.health import HealthReport, Status

logger = logging.getLogger(__name__)


class Checker(Protocol):
    """Anything that can produce a health report for a connection."""

    def check(self, connection: ClusterConnection) -> HealthReport:
        ...


def to_health_status(status: DiagnosticStatus) -> Status:
    if status is DiagnosticStatus.UNAVAILABLE:
        return Status.DOWN
    return Status.UP


class HealthChecker:
    """Combine the topology and token ring diagnostics of a connection.

    The report is DOWN if the whole cluster is down, or if at least one token
    range of the session keyspace cannot be served at the resolved
    consistency level. Both diagnostics are built from gossip state seen by
    the driver, so the result is best-effort.
    """

    def __init__(self, check_config: Optional[CheckConfig] = None) -> None:
        self._config = check_config or CheckConfig()

    def check(self, connection: ClusterConnection) -> HealthReport:
        topology = connection.topology_diagnostic()
        if topology is None:
            raise MalformedResult("Topology diagnostic returned no result")

        details: dict[str, Any] = {"topology": dict(topology.details)}
        ring = self.token_ring_diagnostic(connection)
        if ring is not None:
            details["ring"] = dict(ring.details)

        status = merge_status(topology.status, ring.status if ring else None)
        return HealthReport(status=to_health_status(status), details=details)

    def token_ring_diagnostic(
        self, connection: ClusterConnection
    ) -> Optional[TokenRingDiagnostic]:
        """Ring diagnostic for the session keyspace, or None if it cannot be built."""
        keyspace = connection.keyspace
        if not keyspace:
            return None

        consistency_level = self.consistency_level(connection)
        datacenter = self.datacenter(connection)
        try:
            return connection.token_ring_diagnostic(keyspace, consistency_level, datacenter)
        except ConfigurationUnresolvable as e:
            logger.debug("Skipping token ring diagnostic for %s: %s", keyspace, e)
            return None

    def consistency_level(self, connection: ClusterConnection) -> str:
        return self._config.consistency_level or connection.default_consistency_level()

    def datacenter(self, connection: ClusterConnection) -> Optional[str]:
        return self._config.datacenter or connection.negotiated_local_datacenter()


class LivenessChecker:
    """Read the server version from the local system table."""

    STATEMENT = "SELECT release_version FROM system.local"
    CONSISTENCY_LEVEL = "LOCAL_ONE"

    def check(self, connection: ClusterConnection) -> HealthReport:
        row = connection.execute(self.STATEMENT, self.CONSISTENCY_LEVEL)
        if row is not None and len(row) > 0 and row[0] is not None:
            return HealthReport.up(version=str(row[0]))
        return HealthReport.up()
