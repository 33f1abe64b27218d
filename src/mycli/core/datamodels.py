"""
Data models for command descriptors.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

from mycli.core.helpers import parse_usage


class OptionSpec(BaseModel):
    """Schema for a single command option."""

    alias: Optional[str] = None
    describe: str = ""
    demand: bool = False


class CommandDescriptor(BaseModel):
    """Structured description of one CLI subcommand."""

    command: str
    desc: str = ""
    builder: dict[str, OptionSpec] = Field(default_factory=dict)
    handler: Callable[[dict[str, Any]], None] = Field(exclude=True)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def name(self) -> str:
        return parse_usage(self.command)[0]

    @property
    def positionals(self) -> list[tuple[str, bool]]:
        return parse_usage(self.command)[1]

    def required_options(self) -> list[str]:
        """Names of options flagged with demand=True."""
        return [name for name, spec in self.builder.items() if spec.demand]
