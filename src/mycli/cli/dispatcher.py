"""
Dispatcher - maps command descriptors onto argparse and runs handlers.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Sequence

from mycli.core.datamodels import CommandDescriptor
from mycli.core.exceptions import MissingOptionError
from mycli.services.arguments import ParsedArguments

logger = logging.getLogger(__name__)


def add_command(subparsers: Any, descriptor: CommandDescriptor) -> argparse.ArgumentParser:
    """Add one descriptor as a subcommand.

    Options are never marked required here; see validate_required().
    """
    parser = subparsers.add_parser(descriptor.name, help=descriptor.desc, description=descriptor.desc)

    for name, required in descriptor.positionals:
        if required:
            parser.add_argument(name)
        else:
            parser.add_argument(name, nargs="?")

    for name, spec in descriptor.builder.items():
        flags = [f"--{name}"]
        if spec.alias:
            flags.append(f"-{spec.alias}" if len(spec.alias) == 1 else f"--{spec.alias}")
        help_text = spec.describe + (" (required)" if spec.demand else "")
        parser.add_argument(*flags, dest=name, default=None, help=help_text)

    parser.set_defaults(_descriptor=descriptor)
    return parser


def build_parser(commands: Sequence[CommandDescriptor], prog: str = "mycli") -> argparse.ArgumentParser:
    """Build the top-level parser, one subcommand per descriptor in order."""
    parser = argparse.ArgumentParser(prog=prog, description="Minimal command-line tool framework")
    parser.add_argument(
        "-v", "--verbose", action="store_true", dest="_verbose",
        help="Log loader activity to stderr"
    )
    parser.add_argument(
        "--no-user-units", action="store_true", dest="_no_user_units",
        help="Skip modules and commands from ~/.mycli/"
    )

    # Dispatcher bookkeeping uses _-prefixed dests so any option name is free
    subparsers = parser.add_subparsers(dest="_command", metavar="<command>", help="Available commands")
    for descriptor in commands:
        add_command(subparsers, descriptor)
    return parser


def validate_required(descriptor: CommandDescriptor, values: dict[str, Any]) -> None:
    """Raise MissingOptionError if any demand=True option has no value."""
    missing = [name for name in descriptor.required_options() if values.get(name) is None]
    if missing:
        flags = ", ".join(f"--{name}" for name in missing)
        raise MissingOptionError(f"the following arguments are required: {flags}")


def command_values(namespace: argparse.Namespace) -> dict[str, Any]:
    """Parsed values for the handler, without dispatcher bookkeeping."""
    return {key: value for key, value in vars(namespace).items() if not key.startswith("_")}


def dispatch(
    parser: argparse.ArgumentParser,
    arguments: ParsedArguments,
    argv: Sequence[str] | None = None,
) -> int:
    """
    Parse argv, validate, publish values and run the matched handler.

    Returns:
        Exit status (0 on success). Usage errors exit via parser.error().
    """
    namespace = parser.parse_args(argv)
    descriptor: CommandDescriptor | None = getattr(namespace, "_descriptor", None)

    if descriptor is None:
        parser.print_help()
        return 1

    values = command_values(namespace)
    try:
        validate_required(descriptor, values)
    except MissingOptionError as e:
        parser.error(f"{descriptor.name}: {e}")

    arguments.update(values)
    logger.debug(f"Running command: {descriptor.name} {values}")
    descriptor.handler(values)
    return 0
