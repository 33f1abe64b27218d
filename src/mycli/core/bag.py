"""
Dependency bag shared by modules and commands.

The bag is append-only during startup and sealed once every module and
command factory has run.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator

from mycli.core.exceptions import BagSealedError, CapabilityCollisionError


class DependencyBag(Mapping):
    """Append-only mapping from capability name to capability."""

    def __init__(self, seed: Mapping[str, Any] | None = None):
        self._items: dict[str, Any] = {}
        self._sealed = False
        for name, value in (seed or {}).items():
            self.register(name, value)

    def register(self, name: str, value: Any) -> None:
        """Add a capability. Existing names are never overwritten."""
        if self._sealed:
            raise BagSealedError(f"Cannot register '{name}': dependency bag is sealed")
        if name in self._items:
            raise CapabilityCollisionError(f"Capability already registered: {name}")
        self._items[name] = value

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __getitem__(self, name: str) -> Any:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DependencyBag({', '.join(self._items)})"
