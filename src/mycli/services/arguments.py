"""Parsed-arguments holder exposed as the `arguments` capability."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


class ParsedArguments:
    """Values parsed for the current command line.

    Empty until the dispatcher has parsed argv. Consumers get a read-only
    view through `argv`.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    @property
    def argv(self) -> Mapping[str, Any]:
        return MappingProxyType(self._values)

    def update(self, values: Mapping[str, Any]) -> None:
        self._values = dict(values)
