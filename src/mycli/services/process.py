"""Process handle exposed as the `process` capability."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO


class StdinStream:
    """Standard input with an explicit idle/active state.

    resume() switches the descriptor to blocking mode for a read; pause()
    restores whatever mode it had before.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._was_blocking: bool | None = None
        self.paused = True

    def fileno(self) -> int:
        return (self._stream or sys.stdin).fileno()

    def resume(self) -> None:
        fd = self.fileno()
        self._was_blocking = os.get_blocking(fd)
        if not self._was_blocking:
            os.set_blocking(fd, True)
        self.paused = False

    def pause(self) -> None:
        if self._was_blocking is False:
            os.set_blocking(self.fileno(), False)
        self._was_blocking = None
        self.paused = True


class Process:
    """The running process: standard input and working directory."""

    def __init__(self, stdin: StdinStream | None = None):
        self.stdin = stdin or StdinStream()

    def cwd(self) -> Path:
        return Path.cwd()
