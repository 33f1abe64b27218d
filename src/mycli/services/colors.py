"""ANSI color helpers exposed as the `colors` capability."""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

# ANSI escape codes for colored text
CODES = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "gray": "\033[90m",
}
RESET = "\033[0m"


class Colors:
    """Wraps text in ANSI color codes when enabled."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    @classmethod
    def for_stream(cls, stream: TextIO | None = None) -> "Colors":
        """Enable colors only for a terminal, and never when NO_COLOR is set."""
        stream = stream or sys.stdout
        isatty = getattr(stream, "isatty", None)
        enabled = bool(isatty and isatty()) and "NO_COLOR" not in os.environ
        return cls(enabled=enabled)

    def paint(self, color: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{CODES[color]}{text}{RESET}"

    def __getattr__(self, color: str) -> Callable[[str], str]:
        if color not in CODES:
            raise AttributeError(color)
        return lambda text: self.paint(color, text)
