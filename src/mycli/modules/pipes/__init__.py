"""Pipes module - option values with a fallback to piped standard input.

A command handler calls dep["pipes"].default("name") so that

    echo World | mycli greet

works the same as `mycli greet --name World`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

REQUIRES = ("arguments", "process", "fs")

BUFFER_LENGTH = 32


class Pipes:
    def __init__(self, dep: Mapping[str, Any]):
        self._dep = dep

    @property
    def timeout(self) -> float | None:
        config = self._dep.get("config")
        return config.get("stdin_timeout") if config is not None else None

    def default(self, name: str) -> Any:
        """Return the parsed value for `name`, or else whatever stdin holds.

        A parsed value is returned verbatim without touching stdin. Otherwise
        stdin is read to exhaustion and one trailing newline is stripped; an
        empty or already drained stream gives "".
        """
        value = self._dep["arguments"].argv.get(name)
        if value:
            return value

        logger.debug(f"No value for '{name}', reading stdin")
        text = self.read_stdin()
        return text[:-1] if text.endswith("\n") else text

    def read_stdin(self) -> str:
        """Blocking read of stdin in BUFFER_LENGTH chunks until a short read."""
        stdin = self._dep["process"].stdin
        fs = self._dep["fs"]
        timeout = self.timeout

        stdin.resume()
        try:
            fd = stdin.fileno()
            chunks = []
            while True:
                chunk = fs.read(fd, BUFFER_LENGTH, timeout=timeout)
                chunks.append(chunk)
                if len(chunk) < BUFFER_LENGTH:
                    break
        finally:
            stdin.pause()

        return b"".join(chunks).decode("utf-8", errors="replace")


def factory(dep):
    return Pipes(dep)
