"""Higher-order algebraic curves."""

from __future__ import annotations

from quadcontour.engine.field import scalar_field

# Heart curve is unit-sized; scale so it fills a few field units.
_HEART_SCALE = 3.0


@scalar_field(id="heart", description="(x² + y² − 1)³ − x²·y³, scaled ×3")
def heart(x: float, y: float) -> float:
    x /= _HEART_SCALE
    y /= _HEART_SCALE
    return (x * x + y * y - 1.0) ** 3 - x * x * y**3


@scalar_field(id="lemniscate", description="(x² + y²)² − 8·(x² − y²), Bernoulli lemniscate")
def lemniscate(x: float, y: float) -> float:
    r2 = x * x + y * y
    return r2 * r2 - 8.0 * (x * x - y * y)
