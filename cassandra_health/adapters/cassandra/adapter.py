"""Cluster connection backed by the DataStax Python driver."""

import logging
from collections import Counter
from typing import Any, Iterable, Mapping, Optional, Self, Sequence

from cassandra import ConsistencyLevel, DriverException, OperationTimedOut
from cassandra.connection import ConnectionException
from cassandra.query import SimpleStatement

from cassandra_health.config import CassandraConfig
from cassandra_health.core.diagnostics import (
    DiagnosticStatus,
    TokenRingDiagnostic,
    TopologyDiagnostic,
)
from cassandra_health.core.errors import ConfigurationUnresolvable, ConnectionUnavailable

logger = logging.getLogger(__name__)

MAX_REPORTED_RANGES = 10

_DRIVER_ERRORS = (DriverException, OperationTimedOut, ConnectionException)

# Levels checked as another level when counting replicas.
_EQUIVALENT_LEVELS = {
    "ANY": "ONE",
    "SERIAL": "QUORUM",
    "LOCAL_SERIAL": "LOCAL_QUORUM",
}
_LOCAL_LEVELS = frozenset({"LOCAL_ONE", "LOCAL_QUORUM"})


def _connection_errors() -> tuple[type[Exception], ...]:
    from cassandra.cluster import NoHostAvailable

    return (NoHostAvailable, *_DRIVER_ERRORS)


def _host_state(host: Any) -> str:
    if host.is_up is None:
        return "unknown"
    return "up" if host.is_up else "down"


def _count_details(counts: Counter) -> dict[str, int]:
    return {
        "total": sum(counts.values()),
        "up": counts["up"],
        "down": counts["down"],
        "unknown": counts["unknown"],
    }


def _required_replicas(level: str, replication_factor: int) -> int:
    if level in ("ONE", "LOCAL_ONE"):
        return 1
    if level == "TWO":
        return 2
    if level == "THREE":
        return 3
    if level == "ALL":
        return replication_factor
    return replication_factor // 2 + 1


def _live(replicas: Iterable[Any]) -> int:
    return sum(1 for replica in replicas if replica.is_up)


def _is_available(replicas: Sequence[Any], level: str, datacenter: Optional[str]) -> bool:
    """Whether the live replicas of one token range satisfy ``level``."""
    if not replicas:
        return False

    if level in _LOCAL_LEVELS:
        local = [replica for replica in replicas if replica.datacenter == datacenter]
        return bool(local) and _live(local) >= _required_replicas(level, len(local))

    if level == "EACH_QUORUM":
        by_dc: dict[str, list[Any]] = {}
        for replica in replicas:
            by_dc.setdefault(replica.datacenter, []).append(replica)
        return all(
            _live(dc_replicas) >= _required_replicas(level, len(dc_replicas))
            for dc_replicas in by_dc.values()
        )

    return _live(replicas) >= _required_replicas(level, len(replicas))


class DriverConnection:
    """Expose a ``cassandra.cluster.Session`` as a cluster connection.

    The driver has no diagnostic API, so topology and token ring availability
    are derived from the cluster metadata it keeps up to date from gossip
    events.
    """

    def __init__(self, session: Any, owns_session: bool = False) -> None:
        self._session = session
        self._owns_session = owns_session

    @classmethod
    def connect(cls, config: CassandraConfig) -> Self:
        """Open a session that this connection owns and closes."""
        # cassandra.cluster picks an event loop reactor at import time
        from cassandra.auth import PlainTextAuthProvider
        from cassandra.cluster import EXEC_PROFILE_DEFAULT, Cluster, ExecutionProfile
        from cassandra.policies import DCAwareRoundRobinPolicy, TokenAwarePolicy

        profile = ExecutionProfile(
            load_balancing_policy=TokenAwarePolicy(
                DCAwareRoundRobinPolicy(local_dc=config.local_datacenter)
            ),
            request_timeout=config.request_timeout,
        )
        auth_provider = None
        if config.username:
            auth_provider = PlainTextAuthProvider(
                username=config.username, password=config.password
            )
        cluster = Cluster(
            contact_points=config.contact_points,
            port=config.port,
            auth_provider=auth_provider,
            execution_profiles={EXEC_PROFILE_DEFAULT: profile},
        )
        try:
            session = cluster.connect(config.keyspace)
        except Exception as e:
            cluster.shutdown()
            raise ConnectionUnavailable(f"Could not connect to {config.contact_points}: {e}") from e

        logger.info(
            "Connected to Cassandra at %s (keyspace=%s)",
            ",".join(config.contact_points),
            config.keyspace,
        )
        return cls(session, owns_session=True)

    def close(self) -> None:
        if self._owns_session:
            self._session.cluster.shutdown()
            logger.info("Cassandra connection closed")

    @property
    def session(self) -> Any:
        """Native driver session."""
        return self._session

    @property
    def keyspace(self) -> Optional[str]:
        return self._session.keyspace

    @property
    def _metadata(self) -> Any:
        return self._session.cluster.metadata

    @property
    def _default_profile(self) -> Any:
        return self._session.cluster.profile_manager.default

    def default_consistency_level(self) -> str:
        from cassandra.cluster import _ConfigMode

        if self._session.cluster._config_mode == _ConfigMode.LEGACY:
            level = self._session.default_consistency_level
        else:
            level = self._default_profile.consistency_level
        if level is None:
            level = ConsistencyLevel.LOCAL_ONE
        return ConsistencyLevel.value_to_name[level]

    def negotiated_local_datacenter(self) -> Optional[str]:
        policy = self._default_profile.load_balancing_policy
        while policy is not None:
            local_dc = getattr(policy, "local_dc", None)
            if local_dc:
                return local_dc
            policy = getattr(policy, "_child_policy", None)
        return None

    def topology_diagnostic(self) -> TopologyDiagnostic:
        counts: Counter = Counter()
        by_dc: dict[str, Counter] = {}
        for host in self._metadata.all_hosts():
            state = _host_state(host)
            counts[state] += 1
            by_dc.setdefault(host.datacenter or "unknown", Counter())[state] += 1

        totals = _count_details(counts)
        if totals["up"] == 0:
            status = DiagnosticStatus.UNAVAILABLE
        elif totals["up"] == totals["total"]:
            status = DiagnosticStatus.AVAILABLE
        else:
            status = DiagnosticStatus.PARTIALLY_AVAILABLE

        details: dict[str, Any] = {"status": status.value, **totals}
        details["datacenters"] = {dc: _count_details(c) for dc, c in sorted(by_dc.items())}
        return TopologyDiagnostic(status=status, details=details)

    def token_ring_diagnostic(
        self,
        keyspace: str,
        consistency_level: str,
        datacenter: Optional[str],
    ) -> TokenRingDiagnostic:
        level = _EQUIVALENT_LEVELS.get(consistency_level, consistency_level)
        if level in _LOCAL_LEVELS and not datacenter:
            raise ConfigurationUnresolvable(
                f"Consistency level {consistency_level} needs a local datacenter"
            )

        metadata = self._metadata
        if keyspace not in metadata.keyspaces:
            raise ConfigurationUnresolvable(f"Unknown keyspace: {keyspace}")
        token_map = metadata.token_map
        if token_map is None or not token_map.ring:
            raise ConfigurationUnresolvable("Token metadata is not available")

        ring = token_map.ring
        unavailable: list[str] = []
        for i, token in enumerate(ring):
            replicas = token_map.get_replicas(keyspace, token)
            if not _is_available(replicas, level, datacenter):
                # ring[-1] closes the wrap-around range
                unavailable.append(f"({ring[i - 1].value}, {token.value}]")

        status = DiagnosticStatus.UNAVAILABLE if unavailable else DiagnosticStatus.AVAILABLE
        details: dict[str, Any] = {
            "status": status.value,
            "keyspace": keyspace,
            "consistency_level": consistency_level,
            "available_ranges": len(ring) - len(unavailable),
            "unavailable_ranges": len(unavailable),
        }
        if level in _LOCAL_LEVELS:
            details["datacenter"] = datacenter
        if unavailable:
            details["unavailable_ranges_sample"] = unavailable[:MAX_REPORTED_RANGES]

        return TokenRingDiagnostic(
            status=status,
            keyspace=keyspace,
            consistency_level=consistency_level,
            details=details,
            datacenter=datacenter,
        )

    def execute(self, statement: str, consistency_level: str) -> Optional[Sequence[Any]]:
        query = SimpleStatement(
            statement,
            consistency_level=ConsistencyLevel.name_to_value[consistency_level],
        )
        try:
            row = self._session.execute(query).one()
        except _connection_errors() as e:
            raise ConnectionUnavailable(f"Query failed: {e}") from e

        if row is None:
            return None
        if isinstance(row, Mapping):
            return tuple(row.values())
        return tuple(row)


class UnreachableConnection:
    """Stands in for a connection that could not be opened.

    Every query raises ``ConnectionUnavailable`` with the original failure,
    so the health endpoint keeps reporting DOWN with the reason.
    """

    keyspace: Optional[str] = None

    def __init__(self, error: BaseException) -> None:
        self._error = error

    def _fail(self) -> ConnectionUnavailable:
        return ConnectionUnavailable(str(self._error) or type(self._error).__name__)

    def close(self) -> None:
        pass

    def default_consistency_level(self) -> str:
        raise self._fail()

    def negotiated_local_datacenter(self) -> Optional[str]:
        return None

    def topology_diagnostic(self) -> TopologyDiagnostic:
        raise self._fail()

    def token_ring_diagnostic(
        self,
        keyspace: str,
        consistency_level: str,
        datacenter: Optional[str],
    ) -> TokenRingDiagnostic:
        raise self._fail()

    def execute(self, statement: str, consistency_level: str) -> Optional[Sequence[Any]]:
        raise self._fail()
