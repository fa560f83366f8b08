"""Marching squares — corner-sign classification and the segment lookup table.

Configuration codes weight the corners 8/4/2/1 for tl/tr/br/bl. A bit is
set when the corner value is not strictly positive, so the code says which
corners sit on or below zero.

The comparison is ``not value > 0``, which pins down non-finite values:
    NaN  → bit set (every comparison with NaN is false)
    +inf → bit clear
    -inf → bit set
"""

from __future__ import annotations

import enum
import logging
import math

from quadcontour.engine.geometry import Region, Segment

logger = logging.getLogger(__name__)

EMPTY_CODES = frozenset({0, 15})
SADDLE_CODES = frozenset({5, 10})


class Edge(enum.Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


# Index = configuration code. Code c and 15 - c cut the same edge pair.
# Saddles 5 (tr, bl) and 10 (tl, br) both take the fixed top → right cut.
CONTOUR_TABLE: tuple[tuple[Edge, Edge] | None, ...] = (
    None,                        # 0   ----
    (Edge.LEFT, Edge.BOTTOM),    # 1   bl
    (Edge.BOTTOM, Edge.RIGHT),   # 2   br
    (Edge.LEFT, Edge.RIGHT),     # 3   br bl
    (Edge.TOP, Edge.RIGHT),      # 4   tr
    (Edge.TOP, Edge.RIGHT),      # 5   tr bl (saddle)
    (Edge.TOP, Edge.BOTTOM),     # 6   tr br
    (Edge.LEFT, Edge.TOP),       # 7   tr br bl
    (Edge.LEFT, Edge.TOP),       # 8   tl
    (Edge.TOP, Edge.BOTTOM),     # 9   tl bl
    (Edge.TOP, Edge.RIGHT),      # 10  tl br (saddle)
    (Edge.TOP, Edge.RIGHT),      # 11  tl br bl
    (Edge.LEFT, Edge.RIGHT),     # 12  tl tr
    (Edge.BOTTOM, Edge.RIGHT),   # 13  tl tr bl
    (Edge.LEFT, Edge.BOTTOM),    # 14  tl tr br
    None,                        # 15  all
)


def _bit(value: float) -> int:
    return 0 if value > 0 else 1


def classify(tl: float, tr: float, br: float, bl: float) -> int:
    """Configuration code in [0, 15] for four corner values."""
    code = 8 * _bit(tl) + 4 * _bit(tr) + 2 * _bit(br) + _bit(bl)
    if not all(math.isfinite(v) for v in (tl, tr, br, bl)):
        logger.debug(
            "Non-finite corner value (tl=%r tr=%r br=%r bl=%r) classified as %d",
            tl, tr, br, bl, code,
        )
    return code


def edge_midpoint(region: Region, edge: Edge) -> tuple[float, float]:
    if edge is Edge.TOP:
        return (region.x + region.width / 2, region.y)
    if edge is Edge.RIGHT:
        return (region.right, region.y + region.height / 2)
    if edge is Edge.BOTTOM:
        return (region.x + region.width / 2, region.bottom)
    return (region.x, region.y + region.height / 2)


def lookup(code: int, region: Region) -> Segment | None:
    """Contour segment for a configuration code, scoped to ``region``.

    Returns None for codes 0 and 15 (no sign change in the cell).
    """
    if not 0 <= code <= 15:
        raise ValueError(f"Configuration code out of range: {code}")

    edges = CONTOUR_TABLE[code]
    if edges is None:
        return None

    (x1, y1) = edge_midpoint(region, edges[0])
    (x2, y2) = edge_midpoint(region, edges[1])
    return Segment(x1, y1, x2, y2)
