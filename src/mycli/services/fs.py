"""Filesystem handle exposed as the `fs` capability."""

from __future__ import annotations

import os
import select

from mycli.core.exceptions import StdinTimeoutError


class FileSystem:
    """Low-level descriptor reads."""

    def read(self, fd: int, size: int, timeout: float | None = None) -> bytes:
        """Read up to size bytes from a descriptor, blocking.

        Args:
            fd: File descriptor
            size: Maximum number of bytes
            timeout: Seconds to wait for data, None to wait forever

        Returns:
            The bytes read; empty at end of stream.
        """
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                raise StdinTimeoutError(f"No input on descriptor {fd} after {timeout}s")
        return os.read(fd, size)
