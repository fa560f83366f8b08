"""Scalar fields — the implicit functions whose zero contour gets plotted.

Every named equation is a plain function registered via decorator:

    @scalar_field(id="circle", description="Circle of radius 3")
    def circle(x: float, y: float) -> float:
        return x * x + y * y - 9.0

Equations are written in field coordinates (origin-centred, y up). A
PlotTransform maps world coordinates onto them; the transform belongs to the
field, so the subdivider only ever sees world coordinates.

Marching squares assumes a field does not change sign an even number of
times along one cell edge. Such crossings are invisible at that resolution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from quadcontour.engine.config import PlotConfig

logger = logging.getLogger(__name__)

Equation = Callable[[float, float], float]


class ScalarField(Protocol):
    def evaluate(self, x: float, y: float) -> float: ...


@dataclass(frozen=True)
class PlotTransform:
    """Translates and scales world coordinates into field coordinates."""

    origin_x: float = 400.0
    origin_y: float = 400.0
    step_x: float = 50.0
    step_y: float = 50.0

    def __post_init__(self) -> None:
        if self.step_x == 0 or self.step_y == 0:
            raise ValueError("Step size must be non-zero")

    def to_field(self, x: float, y: float) -> tuple[float, float]:
        return ((x - self.origin_x) / self.step_x, (self.origin_y - y) / self.step_y)

    def to_world(self, fx: float, fy: float) -> tuple[float, float]:
        return (fx * self.step_x + self.origin_x, self.origin_y - fy * self.step_y)

    @classmethod
    def from_config(cls, config: PlotConfig) -> PlotTransform:
        ox, oy = config.origin
        return cls(origin_x=ox, origin_y=oy, step_x=config.step_x, step_y=config.step_y)


@dataclass(frozen=True)
class ExpressionField:
    """Equation in field coordinates, evaluated through a PlotTransform."""

    fn: Equation
    transform: PlotTransform = field(default_factory=PlotTransform)

    def evaluate(self, x: float, y: float) -> float:
        fx, fy = self.transform.to_field(x, y)
        return float(self.fn(fx, fy))


@dataclass(frozen=True)
class CallableField:
    """Function evaluated directly in world coordinates."""

    fn: Equation

    def evaluate(self, x: float, y: float) -> float:
        return float(self.fn(x, y))


@dataclass
class FieldSpec:
    id: str
    fn: Equation
    description: str = ""


class FieldRegistry:
    """Singleton registry of named equations."""

    def __init__(self) -> None:
        self._fields: dict[str, FieldSpec] = {}

    def register(self, spec: FieldSpec) -> None:
        if spec.id in self._fields:
            raise ValueError(f"Duplicate field ID: {spec.id}")
        self._fields[spec.id] = spec
        logger.debug("Registered field %s", spec.id)

    def get(self, field_id: str) -> FieldSpec:
        try:
            return self._fields[field_id]
        except KeyError:
            raise KeyError(f"Unknown field: {field_id}") from None

    def __contains__(self, field_id: str) -> bool:
        return field_id in self._fields

    def all(self) -> list[FieldSpec]:
        return sorted(self._fields.values(), key=lambda s: s.id)

    @property
    def count(self) -> int:
        return len(self._fields)


# Module-level singleton
_registry = FieldRegistry()


def get_field_registry() -> FieldRegistry:
    return _registry


def scalar_field(*, id: str, description: str = ""):
    """Decorator to register a named equation."""

    def decorator(fn: Equation) -> Equation:
        _registry.register(FieldSpec(id=id, fn=fn, description=description))
        return fn

    return decorator


def make_field(
    field_id: str,
    transform: PlotTransform | None = None,
    registry: FieldRegistry | None = None,
) -> ExpressionField:
    """Build an ExpressionField for a registered equation."""
    spec = (registry or _registry).get(field_id)
    return ExpressionField(fn=spec.fn, transform=transform or PlotTransform())
