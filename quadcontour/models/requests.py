"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from quadcontour.render.raster import RenderMode


class ContourRequest(BaseModel):
    field: str = Field(default="xsinx_ycosy", description="Registered field ID")
    min_depth: int = Field(default=5, ge=0, description="Depth above which no branch is pruned")
    max_depth: int = Field(default=10, ge=0, description="Depth at which leaves are forced")
    width: float = Field(default=800.0, gt=0, description="Plot area width")
    height: float = Field(default=800.0, gt=0, description="Plot area height")
    step_x: float = Field(default=50.0, gt=0, description="World units per field unit (x)")
    step_y: float = Field(default=50.0, gt=0, description="World units per field unit (y)")
    parallel: bool = Field(default=False, description="Build root subtrees concurrently")


class RenderRequest(ContourRequest):
    mode: RenderMode = Field(default=RenderMode.CELLS, description="cells, contours or both")


class AsciiRequest(ContourRequest):
    resolution: int = Field(default=32, ge=1, le=256, description="Grid width/height in characters")
