"""PNG rendering of a contour tree via matplotlib.

Classic plotter colours: purple background, black axes
through the field origin, white cells and contour lines.
"""

from __future__ import annotations

import enum
import io

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Rectangle

from quadcontour.engine.geometry import Region
from quadcontour.engine.quadnode import Leaf, QuadNode, for_each_leaf
from quadcontour.render.screen import ScreenTransform

BG = (100 / 255, 100 / 255, 180 / 255)
AXIS = "#000000"
INK = "#ffffff"

_DPI = 100


class RenderMode(str, enum.Enum):
    CELLS = "cells"
    CONTOURS = "contours"
    BOTH = "both"


def render_png(
    tree: QuadNode,
    plot: Region,
    mode: RenderMode = RenderMode.CELLS,
    origin: tuple[float, float] | None = None,
    width_px: int | None = None,
    height_px: int | None = None,
    linewidth: float = 1.0,
) -> bytes:
    """Draw the tree's leaves and return PNG bytes.

    CELLS outlines only leaves that carry a contour. CONTOURS draws the
    segments. BOTH does both. ``origin`` (world coordinates) places the axes;
    defaults to the centre of the plot area.
    """
    mode = RenderMode(mode)
    width_px = width_px or int(plot.width)
    height_px = height_px or int(plot.height)
    screen = ScreenTransform(plot=plot, width=width_px, height=height_px)

    rects: list[Rectangle] = []
    lines: list[list[tuple[float, float]]] = []

    def _collect(leaf: Leaf) -> None:
        if not leaf.has_contour:
            return
        if mode in (RenderMode.CELLS, RenderMode.BOTH):
            x, y, w, h = screen.rect(leaf.region)
            rects.append(Rectangle((x, y), w, h))
        if mode in (RenderMode.CONTOURS, RenderMode.BOTH):
            x1, y1, x2, y2 = screen.line(leaf.contour)
            lines.append([(x1, y1), (x2, y2)])

    for_each_leaf(tree, _collect)

    fig = plt.figure(figsize=(width_px / _DPI, height_px / _DPI), dpi=_DPI)
    try:
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_facecolor(BG)
        fig.patch.set_facecolor(BG)
        ax.set_xlim(0, width_px)
        ax.set_ylim(height_px, 0)
        ax.set_axis_off()

        ox, oy = origin if origin is not None else plot.center
        sx, sy = screen.point(ox, oy)
        ax.axhline(sy, color=AXIS, linewidth=linewidth)
        ax.axvline(sx, color=AXIS, linewidth=linewidth)

        if rects:
            ax.add_collection(
                PatchCollection(rects, facecolor="none", edgecolor=INK, linewidth=linewidth)
            )
        if lines:
            ax.add_collection(LineCollection(lines, colors=INK, linewidths=linewidth))

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=_DPI, facecolor=fig.get_facecolor())
        return buf.getvalue()
    finally:
        plt.close(fig)
