"""FastAPI dependency injection."""

from typing import Annotated
from fastapi import Depends, Request

from cassandra_health import HealthContributorRegistry


async def get_registry(request: Request) -> HealthContributorRegistry:
    """Get the health contributor registry from app state."""
    return request.app.state.health_registry


RegistryDep = Annotated[HealthContributorRegistry, Depends(get_registry)]
