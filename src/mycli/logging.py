"""Logging configuration for the mycli console script.

Diagnostics go to stderr so they never mix with command output on stdout.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

_handler: Optional[logging.Handler] = None


def configure_logging(verbose: bool = False) -> logging.Handler:
    """Attach a stderr handler to the mycli logger tree.

    Calling it again replaces the previous handler.

    Args:
        verbose: Log DEBUG and up when True, WARNING and up otherwise

    Returns:
        The installed handler
    """
    global _handler

    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger("mycli")

    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(_handler)
    root.setLevel(level)

    return _handler
