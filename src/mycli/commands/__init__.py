"""
Built-in commands package.

Each command lives in its own subdirectory whose __init__.py defines
factory(dep) returning a CommandDescriptor. BUILTINS is the manifest.
"""

from __future__ import annotations

from importlib import import_module

from mycli.core.registry import FactoryRegistry

BUILTINS = ("create", "say")


def builtin_commands() -> FactoryRegistry:
    """Fresh registry holding the builtin command factories."""
    registry = FactoryRegistry("command")
    for name in BUILTINS:
        unit = import_module(f"{__name__}.{name}")
        registry.add(name, unit.factory, requires=getattr(unit, "REQUIRES", ()))
    return registry
