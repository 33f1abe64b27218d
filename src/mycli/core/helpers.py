"""
Helper functions for unit names and usage patterns.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")
_PLACEHOLDER = re.compile(r"^([<\[])([^<>\[\]]+)([>\]])$")


def camel_case(name: str) -> str:
    """Convert a unit name to its capability key.

    Examples:
        "log"          -> "log"
        "my-helper"    -> "myHelper"
        "string_utils" -> "stringUtils"
        "HTTP client"  -> "hTTPClient"
    """
    parts = [p for p in _SEPARATORS.split(name or "") if p]
    if not parts:
        return ""
    head, *tail = parts
    return head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in tail)


def parse_usage(usage: str) -> tuple[str, list[tuple[str, bool]]]:
    """Split a usage pattern into command name and positionals.

    "say <prefix>"   -> ("say", [("prefix", True)])
    "greet [who]"    -> ("greet", [("who", False)])

    Returns:
        Tuple of (name, [(positional, required), ...]).
    """
    words = (usage or "").split()
    if not words:
        raise ValueError("Empty usage pattern")

    name, rest = words[0], words[1:]
    positionals = []
    for word in rest:
        match = _PLACEHOLDER.match(word)
        if match is None or (match.group(1) == "<") != (match.group(3) == ">"):
            raise ValueError(f"Invalid placeholder '{word}' in usage '{usage}'")
        positionals.append((match.group(2), match.group(1) == "<"))
    return name, positionals
