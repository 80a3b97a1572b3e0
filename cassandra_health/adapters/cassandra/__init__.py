from cassandra_health.adapters.cassandra.adapter import DriverConnection, UnreachableConnection

__all__ = ["DriverConnection", "UnreachableConnection"]
