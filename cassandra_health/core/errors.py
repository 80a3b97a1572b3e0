"""Health check errors."""


class HealthCheckError(Exception):
    """Base class for health check failures."""


class ConnectionUnavailable(HealthCheckError):
    """A diagnostic query could not be issued or did not complete."""


class MalformedResult(HealthCheckError):
    """A diagnostic query returned something the checker cannot use."""


class ConfigurationUnresolvable(HealthCheckError):
    """Keyspace, datacenter or token metadata needed by a diagnostic is missing."""
