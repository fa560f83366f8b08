"""Leaf-level geometry value types. No engine imports."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple


class Direction(enum.Enum):
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in world coordinates. y grows downward."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def corners(self) -> tuple[tuple[float, float], ...]:
        """Corner points in top-left, top-right, bottom-right, bottom-left order."""
        return (
            (self.x, self.y),
            (self.right, self.y),
            (self.right, self.bottom),
            (self.x, self.bottom),
        )

    def quadrants(self) -> Quadrants:
        """Split into four equal quadrants that tile this region exactly."""
        hw = self.width / 2
        hh = self.height / 2
        return Quadrants(
            ne=Region(self.x + hw, self.y, hw, hh),
            nw=Region(self.x, self.y, hw, hh),
            se=Region(self.x + hw, self.y + hh, hw, hh),
            sw=Region(self.x, self.y + hh, hw, hh),
        )

    def contains(self, px: float, py: float, eps: float = 1e-9) -> bool:
        return (
            self.x - eps <= px <= self.right + eps
            and self.y - eps <= py <= self.bottom + eps
        )


class Quadrants(NamedTuple):
    ne: Region
    nw: Region
    se: Region
    sw: Region


@dataclass(frozen=True)
class Segment:
    """Straight contour piece from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> tuple[float, float]:
        return (self.x2, self.y2)

    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5
