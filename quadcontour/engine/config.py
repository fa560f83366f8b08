"""Plot configuration — plot area, coordinate transform and subdivision depths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quadcontour.config import Settings


@dataclass
class PlotConfig:
    """Controls the plotting area and how deep the quadtree may go."""

    # Plot area in world units, one unit per pixel at the default size
    width: float = 800.0
    height: float = 800.0

    # World units per field unit
    step_x: float = 50.0
    step_y: float = 50.0

    # Field origin in world coordinates; None = centre of the plot area
    origin_x: float | None = None
    origin_y: float | None = None

    # Subdivision bounds
    min_depth: int = 5
    max_depth: int = 10

    @property
    def origin(self) -> tuple[float, float]:
        ox = self.width / 2 if self.origin_x is None else self.origin_x
        oy = self.height / 2 if self.origin_y is None else self.origin_y
        return (ox, oy)

    @classmethod
    def from_settings(cls, settings: Settings) -> PlotConfig:
        return cls(
            width=settings.plot_width,
            height=settings.plot_height,
            step_x=settings.step_x,
            step_y=settings.step_y,
            min_depth=settings.min_depth,
            max_depth=settings.max_depth,
        )
