"""
CLI module for the mycli package.

Builds an argparse dispatcher from the composed command table. The console
script entry point is mycli.cli.main:main.
"""

from mycli.cli.dispatcher import build_parser, dispatch, validate_required
from mycli.cli.main import run

__all__ = [
    "build_parser",
    "dispatch",
    "run",
    "validate_required",
]
