"""Create command - scaffold a new module directory in the working directory."""
from __future__ import annotations

from pathlib import Path

from mycli.core.datamodels import CommandDescriptor

REQUIRES = ("join", "shell", "process", "log")

SCAFFOLDING_DIR = Path(__file__).resolve().parent.parent.parent / "scaffolding" / "create"


def factory(dep) -> CommandDescriptor:
    def handler(argv):
        module_name = argv["moduleName"]
        folder_dst = dep["join"](str(dep["process"].cwd()), module_name)
        dep["shell"].copy(SCAFFOLDING_DIR, folder_dst, force=True)
        dep["log"].debug("Created", str(folder_dst))

    return CommandDescriptor(
        command="create <moduleName>",
        desc="Scaffolding command to create a new module",
        handler=handler,
    )
