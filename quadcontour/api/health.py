"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from quadcontour import __version__
from quadcontour.dependencies import get_registry
from quadcontour.engine.field import FieldRegistry
from quadcontour.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(registry: FieldRegistry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        fields_registered=registry.count,
    )
