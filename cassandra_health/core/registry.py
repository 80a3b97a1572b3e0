"""Registry of named health contributors."""

import asyncio
from typing import Iterator

from cassandra_health.config import DEFAULT_CONTRIBUTOR_NAME, CheckMode, HealthConfig
from cassandra_health.core.checker import Checker, HealthChecker, LivenessChecker
from cassandra_health.core.health import CompositeHealth, HealthReport
from cassandra_health.core.indicators import ReactiveHealthIndicator


class HealthContributorRegistry:
    """Named reactive indicators, checked together for the health endpoint."""

    def __init__(self) -> None:
        self._contributors: dict[str, ReactiveHealthIndicator] = {}

    @classmethod
    def from_config(cls, config: HealthConfig) -> "HealthContributorRegistry":
        """Build one indicator per registered connection.

        A single connection is exposed under the default contributor name,
        whatever key it was registered with. Several connections keep their
        own names.
        """
        registry = cls()
        if not config.enabled:
            return registry

        connections = config.connections
        if len(connections) == 1:
            connections = {DEFAULT_CONTRIBUTOR_NAME: next(iter(connections.values()))}

        for name, connection in connections.items():
            checker = _checker_for(config)
            registry.register(ReactiveHealthIndicator(checker, connection, name=name))
        return registry

    def register(self, indicator: ReactiveHealthIndicator) -> None:
        if indicator.name in self._contributors:
            raise ValueError(f"Health contributor {indicator.name} already registered")
        self._contributors[indicator.name] = indicator

    def unregister(self, name: str) -> None:
        self._contributors.pop(name, None)

    def names(self) -> list[str]:
        return list(self._contributors)

    def get(self, name: str) -> ReactiveHealthIndicator:
        return self._contributors[name]

    def __contains__(self, name: object) -> bool:
        return name in self._contributors

    def __iter__(self) -> Iterator[ReactiveHealthIndicator]:
        return iter(self._contributors.values())

    def __len__(self) -> int:
        return len(self._contributors)

    async def health(self) -> CompositeHealth:
        """Check every contributor concurrently."""
        names = self.names()
        reports: list[HealthReport] = await asyncio.gather(
            *(self._contributors[name].health() for name in names)
        )
        return CompositeHealth(components=dict(zip(names, reports)))


def _checker_for(config: HealthConfig) -> Checker:
    if config.mode is CheckMode.LIVENESS:
        return LivenessChecker()
    return HealthChecker(config.check)
