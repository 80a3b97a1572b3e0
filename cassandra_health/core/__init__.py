"""Core components for Cassandra health checks."""

from cassandra_health.core.checker import Checker, HealthChecker, LivenessChecker
from cassandra_health.core.connection import ClusterConnection
from cassandra_health.core.diagnostics import (
    DiagnosticStatus,
    TokenRingDiagnostic,
    TopologyDiagnostic,
    merge_status,
)
from cassandra_health.core.errors import (
    ConfigurationUnresolvable,
    ConnectionUnavailable,
    HealthCheckError,
    MalformedResult,
)
from cassandra_health.core.health import CompositeHealth, HealthReport, Status
from cassandra_health.core.indicators import HealthIndicator, ReactiveHealthIndicator
from cassandra_health.core.registry import HealthContributorRegistry

__all__ = [
    "Checker",
    "HealthChecker",
    "LivenessChecker",
    "ClusterConnection",
    "DiagnosticStatus",
    "TopologyDiagnostic",
    "TokenRingDiagnostic",
    "merge_status",
    "HealthCheckError",
    "ConnectionUnavailable",
    "MalformedResult",
    "ConfigurationUnresolvable",
    "Status",
    "HealthReport",
    "CompositeHealth",
    "HealthIndicator",
    "ReactiveHealthIndicator",
    "HealthContributorRegistry",
]
