"""Health indicators: adapt a checker to the health endpoint."""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Optional

from cassandra_health.config import DEFAULT_CONTRIBUTOR_NAME
from cassandra_health.core.checker import Checker
from cassandra_health.core.connection import ClusterConnection
from cassandra_health.core.health import HealthReport

logger = logging.getLogger(__name__)

FAILURE_DESCRIPTION = "Cassandra health check failed"


def failure_report(exc: BaseException) -> HealthReport:
    """DOWN report carrying the failure message."""
    return HealthReport.down(error=str(exc) or type(exc).__name__)


class HealthIndicator:
    """Run a checker on the calling thread. Never raises."""

    def __init__(
        self,
        checker: Checker,
        connection: ClusterConnection,
        name: str = DEFAULT_CONTRIBUTOR_NAME,
    ) -> None:
        self.name = name
        self._checker = checker
        self._connection = connection

    def health(self) -> HealthReport:
        try:
            return self._checker.check(self._connection)
        except Exception as e:
            logger.warning("%s [%s]: %s", FAILURE_DESCRIPTION, self.name, e, exc_info=True)
            return failure_report(e)


class ReactiveHealthIndicator:
    """Run a checker off the event loop. The awaitable always yields a report."""

    def __init__(
        self,
        checker: Checker,
        connection: ClusterConnection,
        name: str = DEFAULT_CONTRIBUTOR_NAME,
        executor: Optional[Executor] = None,
    ) -> None:
        self.name = name
        self._checker = checker
        self._connection = connection
        self._executor = executor

    async def health(self) -> HealthReport:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                self._executor, self._checker.check, self._connection
            )
        except Exception as e:
            logger.warning("%s [%s]: %s", FAILURE_DESCRIPTION, self.name, e, exc_info=True)
            return failure_report(e)
