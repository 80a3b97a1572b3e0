"""FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import replace
from fastapi import FastAPI

from cassandra_health import (
    CassandraConfig,
    ConnectionUnavailable,
    DriverConnection,
    HealthConfig,
    HealthContributorRegistry,
    UnreachableConnection,
)
from cassandra_health.config import DEFAULT_CONTRIBUTOR_NAME
from webapp.config import WebAppConfig

logger = logging.getLogger(__name__)


def create_app(
    webapp_config: WebAppConfig | None = None,
    health_config: HealthConfig | None = None,
    cassandra_config: CassandraConfig | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Connections in ``health_config`` belong to the caller. When
    ``cassandra_config`` is given, the app opens one more connection at
    startup, registers it as ``cassandra``, and closes it on shutdown. If that
    connection cannot be opened, the app still starts and reports it DOWN.
    """

    webapp_config = webapp_config or WebAppConfig()
    health_config = health_config or HealthConfig()
    if cassandra_config and DEFAULT_CONTRIBUTOR_NAME in health_config.connections:
        raise ValueError(
            f"Connection name {DEFAULT_CONTRIBUTOR_NAME!r} is reserved for cassandra_config"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: connect the owned session, if any
        owned: DriverConnection | UnreachableConnection | None = None
        if cassandra_config and health_config.enabled:
            try:
                owned = await asyncio.to_thread(DriverConnection.connect, cassandra_config)
            except ConnectionUnavailable as e:
                logger.warning("Cassandra unreachable at startup: %s", e)
                owned = UnreachableConnection(e)
            connections = {DEFAULT_CONTRIBUTOR_NAME: owned, **health_config.connections}
            app.state.health_registry = HealthContributorRegistry.from_config(
                replace(health_config, connections=connections)
            )
        logger.info("Health contributors: %s", app.state.health_registry.names())
        yield
        # Shutdown: close the owned session
        if owned is not None:
            await asyncio.to_thread(owned.close)

    app = FastAPI(
        title=webapp_config.title,
        lifespan=lifespan,
        debug=webapp_config.debug,
    )
    app.state.webapp_config = webapp_config
    app.state.health_registry = HealthContributorRegistry.from_config(health_config)

    # Register routes
    from webapp.health.routes import router as health_router

    app.include_router(health_router)

    return app
