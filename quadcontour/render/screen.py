"""World → screen coordinate mapping for renderers."""

from __future__ import annotations

from dataclasses import dataclass

from quadcontour.engine.geometry import Region, Segment


@dataclass(frozen=True)
class ScreenTransform:
    """Maps the plot area onto a ``width`` × ``height`` pixel canvas.

    World y already grows downward, so ``flip_y`` is only needed by
    renderers whose y axis points up.
    """

    plot: Region
    width: float
    height: float
    flip_y: bool = False

    @property
    def scale_x(self) -> float:
        return self.width / self.plot.width

    @property
    def scale_y(self) -> float:
        return self.height / self.plot.height

    def point(self, x: float, y: float) -> tuple[float, float]:
        sx = (x - self.plot.x) * self.scale_x
        sy = (y - self.plot.y) * self.scale_y
        if self.flip_y:
            sy = self.height - sy
        return (sx, sy)

    def rect(self, region: Region) -> tuple[float, float, float, float]:
        """(x, y, w, h) of ``region`` on screen, anchored at its min corner."""
        x0, y0 = self.point(region.x, region.y)
        x1, y1 = self.point(region.right, region.bottom)
        return (min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))

    def line(self, segment: Segment) -> tuple[float, float, float, float]:
        x1, y1 = self.point(segment.x1, segment.y1)
        x2, y2 = self.point(segment.x2, segment.y2)
        return (x1, y1, x2, y2)
