"""
Built-in modules package.

Each module lives in its own subdirectory whose __init__.py defines
factory(dep). BUILTINS is the manifest: registration order, kept lexical.
"""

from __future__ import annotations

from importlib import import_module

from mycli.core.registry import FactoryRegistry

BUILTINS = ("log", "pipes")


def builtin_modules() -> FactoryRegistry:
    """Fresh registry holding the builtin module factories."""
    registry = FactoryRegistry("module")
    for name in BUILTINS:
        unit = import_module(f"{__name__}.{name}")
        registry.add(name, unit.factory, requires=getattr(unit, "REQUIRES", ()))
    return registry
