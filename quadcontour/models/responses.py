"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    fields_registered: int = 0


class FieldInfo(BaseModel):
    id: str
    description: str = ""


class RegionModel(BaseModel):
    x: float
    y: float
    width: float
    height: float


class SegmentModel(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class LeafModel(BaseModel):
    region: RegionModel
    depth: int
    code: int
    contour: SegmentModel | None = None


class TreeStatsModel(BaseModel):
    internal: int = 0
    leaves: int = 0
    pruned: int = 0
    contours: int = 0
    max_depth: int = 0
    leaf_depths: dict[int, int] = Field(default_factory=dict)


class ContourResponse(BaseModel):
    field: str
    leaves: list[LeafModel] = Field(default_factory=list)
    stats: TreeStatsModel
    processing_time_ms: float = 0.0
