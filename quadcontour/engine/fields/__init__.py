"""Built-in equations. Importing a module here registers its fields."""

from __future__ import annotations

import importlib
import pkgutil


def register_builtin_fields() -> None:
    """Import all field modules so @scalar_field decorators fire."""
    for _, module_name, _ in pkgutil.iter_modules(__path__):
        importlib.import_module(f"{__name__}.{module_name}")
