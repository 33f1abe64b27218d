#!/usr/bin/env python3
"""
Tests for the builtin commands (create, say).
"""

import os
from pathlib import Path
from types import SimpleNamespace

import pytest

from mycli.commands import BUILTINS, builtin_commands
from mycli.commands import create as create_command
from mycli.commands import say as say_command
from mycli.services import Shell


class RecordingLog:
    def __init__(self):
        self.messages = []

    def debug(self, title="", message=""):
        self.messages.append((title, message))


class TestManifest:
    """Tests for the builtin command manifest."""

    def test_lexical_order(self):
        """Test the builtin manifest is in lexical order."""
        assert list(BUILTINS) == sorted(BUILTINS)
        assert builtin_commands().names() == ["create", "say"]


# ============================================================================
# Say Command Tests
# ============================================================================

class TestSay:
    """Tests for say.handler."""

    @pytest.fixture
    def log(self):
        return RecordingLog()

    @pytest.fixture
    def say(self, log):
        return say_command.factory({"log": log})

    def test_descriptor(self, say):
        """Test the descriptor usage, description and options."""
        assert say.command == "say <prefix>"
        assert say.desc == "Prints: <prefix> name surname"
        assert say.builder["name"].alias == "n"
        assert say.builder["name"].demand is True
        assert say.builder["surname"].alias == "s"
        assert say.builder["surname"].demand is False

    def test_prefix_and_name(self, say, log):
        """Test printing prefix and name."""
        say.handler({"prefix": "Hello", "name": "CLI"})
        assert log.messages[-1][0] == "Hello CLI"

    def test_prefix_name_and_surname(self, say, log):
        """Test printing prefix, name and surname."""
        say.handler({"prefix": "Hello", "name": "CLI", "surname": "ILC"})
        assert log.messages[-1][0] == "Hello CLI ILC"

    def test_missing_surname_is_none(self, say, log):
        """Test a None surname is left out."""
        say.handler({"prefix": "Hello", "name": "CLI", "surname": None})
        assert log.messages[-1][0] == "Hello CLI"


# ============================================================================
# Create Command Tests
# ============================================================================

class TestCreate:
    """Tests for create.handler."""

    def test_descriptor(self):
        """Test the descriptor usage, description and options."""
        create = create_command.factory({})
        assert create.name == "create"
        assert create.positionals == [("moduleName", True)]
        assert create.builder == {}

    def test_scaffolding_is_packaged(self):
        """Test the scaffolding template ships with the package."""
        assert (create_command.SCAFFOLDING_DIR / "__init__.py").is_file()

    def test_copies_into_cwd(self, tmp_path):
        """Test the handler copies the template into the working directory."""
        copies = []
        shell = SimpleNamespace(copy=lambda src, dst, force: copies.append((src, dst, force)))
        log = RecordingLog()
        create = create_command.factory({
            "join": os.path.join,
            "shell": shell,
            "process": SimpleNamespace(cwd=lambda: tmp_path),
            "log": log,
        })

        create.handler({"moduleName": "my_module"})

        dst = str(tmp_path / "my_module")
        assert copies == [(create_command.SCAFFOLDING_DIR, dst, True)]
        assert log.messages == [("Created", dst)]

    def test_real_copy(self, tmp_path):
        """Test copying the template twice with the real shell."""
        create = create_command.factory({
            "join": os.path.join,
            "shell": Shell(),
            "process": SimpleNamespace(cwd=lambda: tmp_path),
            "log": RecordingLog(),
        })

        create.handler({"moduleName": "greeting"})
        create.handler({"moduleName": "greeting"})  # overwrite is allowed

        created = tmp_path / "greeting"
        assert (created / "__init__.py").read_text() == (create_command.SCAFFOLDING_DIR / "__init__.py").read_text()
        assert (created / "README.md").exists()
