"""Text rendering of a contour tree, one character per grid cell."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from quadcontour.engine.geometry import Region
from quadcontour.engine.quadnode import Leaf, QuadNode, for_each_leaf

EMPTY = 0
LEAF = 1
CONTOUR = 2

_SYMBOLS = {EMPTY: ".", LEAF: "+", CONTOUR: "X"}


def leaf_grid(tree: QuadNode, plot: Region, resolution: int = 32) -> NDArray[np.int8]:
    """Rasterize leaves onto a resolution×resolution grid.

    Cells covered by a leaf carrying a contour are CONTOUR, other leaf
    cells are LEAF, everything else (pruned space) is EMPTY. A leaf smaller
    than a grid cell still marks the cell it falls in.
    """
    grid = np.zeros((resolution, resolution), dtype=np.int8)

    def _span(lo: float, hi: float, origin: float, extent: float) -> tuple[int, int]:
        start = math.floor((lo - origin) / extent * resolution)
        stop = math.ceil((hi - origin) / extent * resolution)
        start = min(max(start, 0), resolution - 1)
        stop = min(max(stop, start + 1), resolution)
        return start, stop

    def _mark(leaf: Leaf) -> None:
        c0, c1 = _span(leaf.region.x, leaf.region.right, plot.x, plot.width)
        r0, r1 = _span(leaf.region.y, leaf.region.bottom, plot.y, plot.height)
        value = CONTOUR if leaf.has_contour else LEAF
        np.maximum(grid[r0:r1, c0:c1], value, out=grid[r0:r1, c0:c1])

    for_each_leaf(tree, _mark)
    return grid


def grid_to_text(grid: NDArray[np.int8]) -> str:
    rows = []
    for row in grid:
        rows.append(" ".join(_SYMBOLS[int(cell)] for cell in row))
    return "\n".join(rows)


def render_ascii(tree: QuadNode, plot: Region, resolution: int = 32) -> str:
    return grid_to_text(leaf_grid(tree, plot, resolution))
