"""Conic sections and lines."""

from __future__ import annotations

from quadcontour.engine.field import scalar_field

_CIRCLE_RADIUS = 3.0


@scalar_field(id="circle", description="x² + y² − 9, circle of radius 3")
def circle(x: float, y: float) -> float:
    return x * x + y * y - _CIRCLE_RADIUS**2


@scalar_field(id="hyperbola", description="x·y − 1")
def hyperbola(x: float, y: float) -> float:
    return x * y - 1.0


@scalar_field(id="line", description="y − x, the diagonal")
def line(x: float, y: float) -> float:
    return y - x
