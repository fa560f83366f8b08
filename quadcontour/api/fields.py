"""GET /api/fields — registered equations."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from quadcontour.dependencies import get_registry
from quadcontour.engine.field import FieldRegistry
from quadcontour.models.responses import FieldInfo

router = APIRouter()


@router.get("/fields", response_model=list[FieldInfo])
async def list_fields(registry: FieldRegistry = Depends(get_registry)) -> list[FieldInfo]:
    return [FieldInfo(id=spec.id, description=spec.description) for spec in registry.all()]
