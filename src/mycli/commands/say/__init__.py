"""Say command - prints `<prefix> name surname` through the log module."""
from __future__ import annotations

from mycli.core.datamodels import CommandDescriptor, OptionSpec

REQUIRES = ("log",)


def factory(dep) -> CommandDescriptor:
    def handler(argv):
        parts = [argv["prefix"], argv.get("name"), argv.get("surname")]
        dep["log"].debug(" ".join(str(p) for p in parts if p))

    return CommandDescriptor(
        command="say <prefix>",
        desc="Prints: <prefix> name surname",
        builder={
            "name": OptionSpec(alias="n", describe="Pass the name", demand=True),
            "surname": OptionSpec(alias="s", describe="Pass the surname"),
        },
        handler=handler,
    )
