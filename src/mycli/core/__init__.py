"""
Core module for the mycli package.

Provides the dependency bag, the factory registry, command descriptors and
the exception hierarchy.
"""

from mycli.core.bag import DependencyBag
from mycli.core.datamodels import CommandDescriptor, OptionSpec
from mycli.core.exceptions import (
    BagSealedError,
    CapabilityCollisionError,
    FactoryError,
    LoaderError,
    MissingCapabilityError,
    MissingOptionError,
    MyCliError,
    StdinTimeoutError,
)
from mycli.core.helpers import camel_case, parse_usage
from mycli.core.registry import FactoryEntry, FactoryRegistry

__all__ = [
    # Bag and registry
    "DependencyBag",
    "FactoryEntry",
    "FactoryRegistry",
    # Models
    "CommandDescriptor",
    "OptionSpec",
    # Exceptions
    "MyCliError",
    "LoaderError",
    "FactoryError",
    "CapabilityCollisionError",
    "MissingCapabilityError",
    "BagSealedError",
    "MissingOptionError",
    "StdinTimeoutError",
    # Helpers
    "camel_case",
    "parse_usage",
]
