"""Configuration dataclasses for Cassandra health checks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cassandra_health.core.connection import ClusterConnection

CONSISTENCY_LEVELS = (
    "ANY",
    "ONE",
    "TWO",
    "THREE",
    "QUORUM",
    "ALL",
    "LOCAL_QUORUM",
    "EACH_QUORUM",
    "SERIAL",
    "LOCAL_SERIAL",
    "LOCAL_ONE",
)

DEFAULT_CONTRIBUTOR_NAME = "cassandra"


class CheckMode(str, Enum):
    """Which checker backs each registered connection."""

    DIAGNOSTIC = "diagnostic"  # topology + token ring
    LIVENESS = "liveness"  # SELECT release_version


@dataclass
class CassandraConfig:
    """Driver connection configuration."""

    contact_points: list[str] = field(default_factory=lambda: ["127.0.0.1"])
    port: int = 9042
    keyspace: Optional[str] = None
    local_datacenter: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    request_timeout: float = 10.0

    def __post_init__(self) -> None:
        if not self.contact_points:
            raise ValueError("contact_points must not be empty")


@dataclass
class CheckConfig:
    """Per-check overrides. None means "use what the connection negotiated"."""

    consistency_level: Optional[str] = None
    datacenter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.consistency_level is not None:
            level = self.consistency_level.upper()
            if level not in CONSISTENCY_LEVELS:
                raise ValueError(f"Unknown consistency level: {self.consistency_level}")
            self.consistency_level = level


@dataclass
class HealthConfig:
    """Registration of the connections exposed to the health endpoint."""

    enabled: bool = True
    connections: dict[str, "ClusterConnection"] = field(default_factory=dict)
    check: CheckConfig = field(default_factory=CheckConfig)
    mode: CheckMode = CheckMode.DIAGNOSTIC
