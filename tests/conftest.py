"""Shared test fixtures."""

from __future__ import annotations

import pytest

from quadcontour.engine.field import CallableField
from quadcontour.engine.fields import register_builtin_fields
from quadcontour.engine.geometry import Region

register_builtin_fields()

BUILTIN_FIELDS = {
    "xsinx_ycosy",
    "sin_sum",
    "circle",
    "hyperbola",
    "line",
    "heart",
    "lemniscate",
}


class CountingField:
    """Wraps a function and counts evaluations."""

    def __init__(self, fn) -> None:
        self.fn = fn
        self.calls = 0

    def evaluate(self, x: float, y: float) -> float:
        self.calls += 1
        return float(self.fn(x, y))


@pytest.fixture
def plot() -> Region:
    return Region(0.0, 0.0, 800.0, 800.0)


@pytest.fixture
def positive_field() -> CallableField:
    return CallableField(lambda x, y: 1.0)


@pytest.fixture
def vertical_line_field() -> CallableField:
    return CallableField(lambda x, y: x - 400.0)


@pytest.fixture
def circle_field() -> CallableField:
    # Radius-150 circle centred in the 800x800 plot
    return CallableField(lambda x, y: (x - 400.0) ** 2 + (y - 400.0) ** 2 - 150.0**2)


@pytest.fixture
def counting_field():
    return CountingField


@pytest.fixture
def builtin_field_ids() -> set[str]:
    return set(BUILTIN_FIELDS)
