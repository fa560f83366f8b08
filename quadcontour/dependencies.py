"""FastAPI dependency injection."""

from __future__ import annotations

from quadcontour.config import settings
from quadcontour.engine.field import FieldRegistry, get_field_registry


def get_settings():
    return settings


def get_registry() -> FieldRegistry:
    return get_field_registry()
