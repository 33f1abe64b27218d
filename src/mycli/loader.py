"""
Unit loader - builds the dependency bag and the command table.

Units come from two places:
1. The builtin manifests in mycli.modules and mycli.commands
2. ~/.mycli/modules/ and ~/.mycli/commands/ (user-hackable, optional)

Each directory unit is a subdirectory with an __init__.py that defines a
module-level factory taking the dependency bag:

    # ~/.mycli/modules/greeting/__init__.py
    REQUIRES = ("log",)

    def factory(dep):
        return lambda who: dep["log"].debug("Hello", who)

Module factories run first, in order, and each result is registered in the
bag under the camel-cased unit name. A module only sees the capabilities
registered before it. Command factories run afterwards against the complete
bag and must return a CommandDescriptor (or a mapping that validates as one).

Any failure aborts composition: there is no partially loaded registry.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping

from pydantic import ValidationError

from mycli.core.bag import DependencyBag
from mycli.core.datamodels import CommandDescriptor
from mycli.core.exceptions import FactoryError, LoaderError, MissingCapabilityError
from mycli.core.helpers import camel_case
from mycli.core.registry import FactoryEntry, FactoryRegistry

logger = logging.getLogger(__name__)

# Default user unit directories
USER_MODULES_DIR = Path.home() / ".mycli" / "modules"
USER_COMMANDS_DIR = Path.home() / ".mycli" / "commands"


@dataclass
class Composition:
    """Public result of composition, consumed by the dispatcher."""

    commands: list[CommandDescriptor]
    modules: DependencyBag

    def command_map(self) -> dict[str, CommandDescriptor]:
        """Command name -> descriptor, in registration order."""
        return {descriptor.name: descriptor for descriptor in self.commands}


def discover_units(units_dir: Path) -> list[Path]:
    """
    Discover unit directories in the given path.

    Args:
        units_dir: Directory to search

    Returns:
        Sorted list of __init__.py paths for valid units.
    """
    if not units_dir.exists():
        return []

    if not units_dir.is_dir():
        logger.warning(f"Units path is not a directory: {units_dir}")
        return []

    unit_paths = []
    for subdir in sorted(units_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            unit_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return unit_paths


def load_unit(unit_path: Path, prefix: str) -> ModuleType:
    """
    Import a single unit from its __init__.py.

    Args:
        unit_path: Path to the unit's __init__.py file.
        prefix: Module name prefix for sys.modules

    Returns:
        The imported module.
    """
    unit_name = unit_path.parent.name
    module_name = f"{prefix}.{unit_name}"

    spec = spec_from_file_location(module_name, unit_path)
    if spec is None or spec.loader is None:
        raise FactoryError(f"Could not create module spec for {unit_path}")

    module = module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise FactoryError(f"Failed to import unit '{unit_name}': {e}") from e

    return module


def add_unit(registry: FactoryRegistry, name: str, module: ModuleType, source: str, replace: bool = False) -> FactoryEntry:
    """Register the factory exported by an imported unit module."""
    factory = getattr(module, "factory", None)
    if factory is None:
        raise FactoryError(f"{registry.kind} unit '{name}' ({source}) defines no factory")
    requires = getattr(module, "REQUIRES", ())
    return registry.add(name, factory, requires=requires, source=source, replace=replace)


def add_directory(registry: FactoryRegistry, units_dir: Path, prefix: str) -> int:
    """
    Append every unit found in a directory to a registry.

    Units whose name matches an existing entry replace that entry.

    Returns:
        Number of units added.
    """
    count = 0
    for unit_path in discover_units(units_dir):
        name = unit_path.parent.name
        module = load_unit(unit_path, prefix=prefix)
        add_unit(registry, name, module, source=str(unit_path.parent), replace=True)
        count += 1
    return count


def _invoke(entry: FactoryEntry, kind: str, bag: DependencyBag) -> Any:
    missing = [name for name in entry.requires if name not in bag]
    if missing:
        raise MissingCapabilityError(
            f"{kind} '{entry.name}' requires unregistered capabilities: {', '.join(missing)}"
        )
    try:
        return entry.factory(bag)
    except LoaderError:
        raise
    except Exception as e:
        raise FactoryError(f"{kind} '{entry.name}' factory failed: {e}") from e


def load_modules(registry: FactoryRegistry, bag: DependencyBag) -> DependencyBag:
    """
    Run module factories in registry order, extending the bag in place.

    Returns:
        The same bag, now holding every module capability.
    """
    for entry in registry:
        key = camel_case(entry.name)
        if not key:
            raise FactoryError(f"Module unit name '{entry.name}' yields an empty capability key")
        capability = _invoke(entry, "module", bag)
        bag.register(key, capability)
        logger.debug(f"Registered module: {key} ({entry.source})")
    return bag


def load_commands(registry: FactoryRegistry, bag: Mapping[str, Any]) -> list[CommandDescriptor]:
    """
    Run command factories in registry order against the complete bag.

    Returns:
        Command descriptors in registration order.
    """
    commands: list[CommandDescriptor] = []
    seen: dict[str, str] = {}
    for entry in registry:
        result = _invoke(entry, "command", bag)
        if isinstance(result, CommandDescriptor):
            descriptor = result
        else:
            try:
                descriptor = CommandDescriptor.model_validate(result)
            except ValidationError as e:
                raise FactoryError(f"command '{entry.name}' returned an invalid descriptor: {e}") from e

        try:
            name = descriptor.name
        except ValueError as e:
            raise FactoryError(f"command '{entry.name}': {e}") from e
        if name in seen:
            raise FactoryError(f"Command '{name}' defined by both '{seen[name]}' and '{entry.name}'")
        seen[name] = entry.name

        commands.append(descriptor)
        logger.debug(f"Registered command: {name} ({entry.source})")
    return commands


def compose(
    seed: Mapping[str, Any],
    modules: FactoryRegistry | None = None,
    commands: FactoryRegistry | None = None,
    user_units: bool = False,
    modules_dir: Path | None = None,
    commands_dir: Path | None = None,
) -> Composition:
    """
    Build the dependency bag and command table.

    Args:
        seed: External capabilities to start the bag with
        modules: Module registry (default: builtin manifest)
        commands: Command registry (default: builtin manifest)
        user_units: Also load units from the user directories
        modules_dir: User modules directory (default: ~/.mycli/modules)
        commands_dir: User commands directory (default: ~/.mycli/commands)

    Returns:
        Composition with a sealed bag.
    """
    if modules is None:
        from mycli.modules import builtin_modules
        modules = builtin_modules()
    if commands is None:
        from mycli.commands import builtin_commands
        commands = builtin_commands()

    if user_units:
        add_directory(modules, modules_dir or USER_MODULES_DIR, prefix="mycli_module")
        add_directory(commands, commands_dir or USER_COMMANDS_DIR, prefix="mycli_command")

    bag = DependencyBag(seed)
    load_modules(modules, bag)
    descriptors = load_commands(commands, bag)
    bag.seal()

    return Composition(commands=descriptors, modules=bag)
