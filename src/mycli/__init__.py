"""
mycli - minimal command-line tool framework

Units (modules and commands) are plain factories that receive a shared
dependency bag. Modules extend the bag; commands return descriptors that the
CLI dispatcher turns into subcommands.

Example usage:
    from mycli import compose
    from mycli.services import default_capabilities

    composition = compose(seed=default_capabilities())
    composition.modules["log"].debug("Title", "Description")
    say = composition.command_map()["say"]
    say.handler({"prefix": "Hello", "name": "CLI"})
"""

__version__ = "0.1.0"

from mycli.core import (
    CommandDescriptor,
    DependencyBag,
    FactoryError,
    FactoryRegistry,
    LoaderError,
    MissingOptionError,
    MyCliError,
    OptionSpec,
    camel_case,
)
from mycli.loader import Composition, compose, load_commands, load_modules

__all__ = [
    # Version
    "__version__",
    # Composition
    "Composition",
    "compose",
    "load_modules",
    "load_commands",
    # Core
    "CommandDescriptor",
    "OptionSpec",
    "DependencyBag",
    "FactoryRegistry",
    "camel_case",
    # Exceptions
    "MyCliError",
    "LoaderError",
    "FactoryError",
    "MissingOptionError",
]
