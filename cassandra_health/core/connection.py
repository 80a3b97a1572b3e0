"""Protocol for the cluster connection a checker reads from."""

from typing import Any, Optional, Protocol, Sequence

from cassandra_health.core.diagnostics import TokenRingDiagnostic, TopologyDiagnostic


class ClusterConnection(Protocol):
    """Read-only view of a live cluster session.

    The host application owns the connection. Checkers only read from it and
    never close it. Implementations must tolerate concurrent calls from
    simultaneous health checks.
    """

    @property
    def keyspace(self) -> Optional[str]:
        """Keyspace selected on the session, if any."""
        ...

    def default_consistency_level(self) -> str:
        """Name of the driver's default consistency level, e.g. ``LOCAL_ONE``."""
        ...

    def negotiated_local_datacenter(self) -> Optional[str]:
        """Datacenter the driver routes requests to, if it has settled on one."""
        ...

    def topology_diagnostic(self) -> TopologyDiagnostic:
        """Report which nodes are up."""
        ...

    def token_ring_diagnostic(
        self,
        keyspace: str,
        consistency_level: str,
        datacenter: Optional[str],
    ) -> TokenRingDiagnostic:
        """Report whether every token range of ``keyspace`` can serve ``consistency_level``.

        Raises:
            ConfigurationUnresolvable: If the keyspace, datacenter or token
                metadata needed for the diagnostic is missing.
        """
        ...

    def execute(self, statement: str, consistency_level: str) -> Optional[Sequence[Any]]:
        """Run a read query and return its first row, or None."""
        ...
