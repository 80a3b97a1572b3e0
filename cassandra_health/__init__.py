"""Cassandra health checks for service health endpoints."""

from cassandra_health.config import (
    CassandraConfig,
    CheckConfig,
    CheckMode,
    HealthConfig,
)
from cassandra_health.core import (
    Checker,
    ClusterConnection,
    CompositeHealth,
    ConfigurationUnresolvable,
    ConnectionUnavailable,
    DiagnosticStatus,
    HealthCheckError,
    HealthChecker,
    HealthContributorRegistry,
    HealthIndicator,
    HealthReport,
    LivenessChecker,
    MalformedResult,
    ReactiveHealthIndicator,
    Status,
    TokenRingDiagnostic,
    TopologyDiagnostic,
)
from cassandra_health.adapters.cassandra import DriverConnection, UnreachableConnection

__all__ = [
    # Config
    "CassandraConfig",
    "CheckConfig",
    "CheckMode",
    "HealthConfig",
    # Reports
    "Status",
    "HealthReport",
    "CompositeHealth",
    # Diagnostics
    "DiagnosticStatus",
    "TopologyDiagnostic",
    "TokenRingDiagnostic",
    # Checkers
    "Checker",
    "ClusterConnection",
    "HealthChecker",
    "LivenessChecker",
    # Indicators
    "HealthIndicator",
    "ReactiveHealthIndicator",
    "HealthContributorRegistry",
    # Errors
    "HealthCheckError",
    "ConnectionUnavailable",
    "MalformedResult",
    "ConfigurationUnresolvable",
    # Driver
    "DriverConnection",
    "UnreachableConnection",
]
