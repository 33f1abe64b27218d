"""Console sink exposed as the `console` capability."""

from __future__ import annotations

import sys
from typing import Any, TextIO


class Console:
    """Writes lines to stdout, errors to stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err

    def log(self, *values: Any) -> None:
        print(*values, file=self._out or sys.stdout)

    def error(self, *values: Any) -> None:
        print(*values, file=self._err or sys.stderr)
