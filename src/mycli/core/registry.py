"""
Factory registry: the explicit manifest of module and command units.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from mycli.core.exceptions import FactoryError

logger = logging.getLogger(__name__)


@dataclass
class FactoryEntry:
    """Entry for a registered unit factory."""

    name: str
    factory: Callable[[Any], Any]
    requires: tuple[str, ...] = ()
    source: str = "builtin"


class FactoryRegistry:
    """Ordered registry of unit factories.

    Iteration order is insertion order. Replacing an entry keeps its
    original position.
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._entries: dict[str, FactoryEntry] = {}

    def add(
        self,
        name: str,
        factory: Callable[[Any], Any],
        requires: tuple[str, ...] | list[str] = (),
        source: str = "builtin",
        replace: bool = False,
    ) -> FactoryEntry:
        """Add a factory under a unit name.

        Args:
            name: Unit name (directory name for discovered units)
            factory: Callable taking the dependency bag
            requires: Capability names the factory reads
            source: Where the unit came from, for diagnostics
            replace: Allow replacing an existing entry of the same name

        Returns:
            The new FactoryEntry.
        """
        if not callable(factory):
            raise FactoryError(f"{self.kind} '{name}' factory is not callable")
        if name in self._entries:
            if not replace:
                raise FactoryError(f"Duplicate {self.kind} unit: {name}")
            logger.info(f"{self.kind} '{name}' from {source} overrides {self._entries[name].source}")

        entry = FactoryEntry(name=name, factory=factory, requires=tuple(requires), source=source)
        self._entries[name] = entry
        return entry

    def get(self, name: str) -> FactoryEntry | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __iter__(self):
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
