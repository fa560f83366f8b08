"""Trigonometric fields. xsinx_ycosy is the plotter's default equation."""

from __future__ import annotations

import numpy as np

from quadcontour.engine.field import scalar_field


@scalar_field(id="xsinx_ycosy", description="x·sin(x) − y·cos(y)")
def xsinx_ycosy(x: float, y: float) -> float:
    return x * np.sin(x) - y * np.cos(y)


@scalar_field(id="sin_sum", description="sin(x) + sin(y), a lattice of closed loops")
def sin_sum(x: float, y: float) -> float:
    return np.sin(x) + np.sin(y)
