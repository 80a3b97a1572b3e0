"""FastAPI routes for the health endpoint."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from webapp.dependencies import RegistryDep
from webapp.health.models import CompositeHealthResponse, HealthResponse

router = APIRouter(prefix="/health", tags=["health"])

STATUS_CODES = {"UP": 200, "DOWN": 503}


@router.get("", response_model=CompositeHealthResponse)
async def health(registry: RegistryDep):
    """Aggregate health of all registered connections."""
    body = CompositeHealthResponse.from_health(await registry.health())
    return JSONResponse(content=body.model_dump(), status_code=STATUS_CODES[body.status])


@router.get("/{name}", response_model=HealthResponse)
async def contributor_health(name: str, registry: RegistryDep):
    """Health of a single named connection."""
    if name not in registry:
        raise HTTPException(status_code=404, detail="Health contributor not found")

    body = HealthResponse.from_report(await registry.get(name).health())
    return JSONResponse(content=body.model_dump(), status_code=STATUS_CODES[body.status])
