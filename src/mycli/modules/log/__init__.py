"""Log module - labelled, colored debug lines on the console."""
from __future__ import annotations

from typing import Any, Mapping

REQUIRES = ("console", "colors")

DEFAULT_LABEL = "[MyCli]"


class Log:
    def __init__(self, dep: Mapping[str, Any]):
        self._dep = dep

    @property
    def label(self) -> str:
        config = self._dep.get("config")
        return config.get("label", DEFAULT_LABEL) if config is not None else DEFAULT_LABEL

    def debug(self, title: str = "", message: str = "") -> None:
        """Print `<label> <title> <message>`, skipping empty parts."""
        colors = self._dep["colors"]
        line = colors.yellow(self.label)
        if title:
            line += colors.blue(" " + title)
        if message:
            line += colors.gray(" " + message)
        self._dep["console"].log(line)


def factory(dep):
    return Log(dep)
