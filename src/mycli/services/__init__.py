"""
External services seeded into the dependency bag.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from mycli.config import Config
from mycli.services.arguments import ParsedArguments
from mycli.services.colors import Colors
from mycli.services.console import Console
from mycli.services.fs import FileSystem
from mycli.services.process import Process, StdinStream
from mycli.services.shell import Shell


def _resolve(*parts: str) -> str:
    return str(Path(*parts).resolve())


def default_capabilities(
    arguments: ParsedArguments | None = None,
    config: Config | None = None,
) -> dict[str, Any]:
    """Build the seed capabilities for a real process."""
    return {
        "join": os.path.join,
        "resolve": _resolve,
        "console": Console(),
        "colors": Colors.for_stream(),
        "shell": Shell(),
        "process": Process(),
        "fs": FileSystem(),
        "arguments": arguments or ParsedArguments(),
        "config": config or Config(),
    }


__all__ = [
    "Colors",
    "Console",
    "FileSystem",
    "ParsedArguments",
    "Process",
    "Shell",
    "StdinStream",
    "default_capabilities",
]
