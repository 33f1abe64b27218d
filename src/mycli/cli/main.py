#!/usr/bin/env python3
"""
CLI entry point (mycli command).

    mycli say Hello --name CLI --surname ILC
    mycli create my_module
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from typing import Sequence

from mycli.config import get_config
from mycli.core.exceptions import LoaderError
from mycli.loader import compose
from mycli.logging import configure_logging
from mycli.services import ParsedArguments, default_capabilities
from mycli.cli.dispatcher import build_parser, dispatch

logger = logging.getLogger(__name__)


def _startup_flags(argv: Sequence[str]) -> argparse.Namespace:
    """Read the global flags that affect composition itself.

    Like the full parser, only the options before the subcommand count.
    """
    head = list(itertools.takewhile(lambda arg: arg.startswith("-"), argv))
    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre.add_argument("-v", "--verbose", action="store_true")
    pre.add_argument("--no-user-units", action="store_true")
    flags, _ = pre.parse_known_args(head)
    return flags


def run(argv: Sequence[str] | None = None) -> int:
    """Compose units and dispatch argv. Returns the exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)
    flags = _startup_flags(argv)
    config = get_config()

    configure_logging(flags.verbose or bool(config.get("verbose")))

    arguments = ParsedArguments()
    try:
        composition = compose(
            seed=default_capabilities(arguments=arguments, config=config),
            user_units=bool(config.get("user_units")) and not flags.no_user_units,
        )
    except LoaderError as e:
        logger.debug("Startup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = build_parser(composition.commands)
    return dispatch(parser, arguments, argv)


def main():
    """Main entry point for the mycli CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()
