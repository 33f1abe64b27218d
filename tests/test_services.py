#!/usr/bin/env python3
"""
Tests for the seeded services.
"""

import io
import os

import pytest

from mycli.config import Config
from mycli.core.exceptions import StdinTimeoutError
from mycli.services import (
    Colors,
    Console,
    FileSystem,
    ParsedArguments,
    Process,
    Shell,
    default_capabilities,
)


class TestDefaultCapabilities:
    """Tests for the seed set."""

    def test_names(self):
        """Test the seeded capability names and order."""
        seed = default_capabilities()
        assert list(seed) == [
            "join", "resolve", "console", "colors", "shell",
            "process", "fs", "arguments", "config",
        ]

    def test_shared_arguments_and_config(self):
        """Test given arguments and config are used as-is."""
        arguments = ParsedArguments()
        config = Config(label="x")
        seed = default_capabilities(arguments=arguments, config=config)
        assert seed["arguments"] is arguments
        assert seed["config"] is config

    def test_resolve_is_absolute(self, tmp_path):
        """Test resolve returns an absolute path."""
        seed = default_capabilities()
        assert os.path.isabs(seed["resolve"]("relative", "path"))
        assert seed["resolve"](str(tmp_path)) == str(tmp_path.resolve())


class TestColors:
    """Tests for Colors."""

    def test_enabled(self):
        """Test colors wrap text when enabled."""
        assert Colors(enabled=True).yellow("x") == "\033[33mx\033[0m"

    def test_disabled(self):
        """Test colors return text unchanged when disabled."""
        assert Colors(enabled=False).blue("x") == "x"

    def test_unknown_color(self):
        """Test an unknown color raises AttributeError."""
        with pytest.raises(AttributeError):
            Colors().purple

    def test_not_a_tty(self):
        """Test colors are off for a non-terminal stream."""
        assert Colors.for_stream(io.StringIO()).enabled is False

    def test_no_color_env(self, monkeypatch):
        """Test NO_COLOR disables colors on a terminal."""
        class Tty(io.StringIO):
            def isatty(self):
                return True

        monkeypatch.delenv("NO_COLOR", raising=False)
        assert Colors.for_stream(Tty()).enabled is True
        monkeypatch.setenv("NO_COLOR", "1")
        assert Colors.for_stream(Tty()).enabled is False


class TestConsole:
    """Tests for Console."""

    def test_log_and_error(self):
        """Test log writes to stdout and error to stderr."""
        out, err = io.StringIO(), io.StringIO()
        console = Console(out=out, err=err)
        console.log("a", "b")
        console.error("oops")
        assert out.getvalue() == "a b\n"
        assert err.getvalue() == "oops\n"


class TestShell:
    """Tests for Shell.copy."""

    def test_copy_tree(self, tmp_path):
        """Test copying a directory tree."""
        src = tmp_path / "src"
        (src / "sub").mkdir(parents=True)
        (src / "sub" / "f.txt").write_text("hi")

        dst = Shell().copy(src, tmp_path / "dst")
        assert (dst / "sub" / "f.txt").read_text() == "hi"

    def test_copy_tree_existing_without_force(self, tmp_path):
        """Test copying onto an existing directory without force fails."""
        src = tmp_path / "src"
        src.mkdir()
        (tmp_path / "dst").mkdir()
        with pytest.raises(FileExistsError):
            Shell().copy(src, tmp_path / "dst", force=False)

    def test_copy_file(self, tmp_path):
        """Test copying a file into a new directory."""
        src = tmp_path / "a.txt"
        src.write_text("x")
        Shell().copy(src, tmp_path / "out" / "b.txt")
        assert (tmp_path / "out" / "b.txt").read_text() == "x"

    def test_copy_file_existing_without_force(self, tmp_path):
        """Test copying onto an existing file without force fails."""
        src = tmp_path / "a.txt"
        src.write_text("x")
        (tmp_path / "b.txt").write_text("y")
        with pytest.raises(FileExistsError):
            Shell().copy(src, tmp_path / "b.txt", force=False)


class TestFileSystem:
    """Tests for FileSystem.read."""

    def test_read_and_eof(self):
        """Test reading data and then end of stream."""
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"abc")
            os.close(write_fd)
            fs = FileSystem()
            assert fs.read(read_fd, 32) == b"abc"
            assert fs.read(read_fd, 32) == b""
        finally:
            os.close(read_fd)

    def test_timeout(self):
        """Test a read with no input times out."""
        read_fd, write_fd = os.pipe()
        try:
            with pytest.raises(StdinTimeoutError):
                FileSystem().read(read_fd, 32, timeout=0.01)
        finally:
            os.close(read_fd)
            os.close(write_fd)


class TestProcessAndArguments:
    """Tests for Process and ParsedArguments."""

    def test_cwd(self, tmp_path, monkeypatch):
        """Test cwd returns the working directory."""
        monkeypatch.chdir(tmp_path)
        assert Process().cwd() == tmp_path.resolve()

    def test_stdin_starts_paused(self):
        """Test stdin starts in the paused state."""
        assert Process().stdin.paused

    def test_arguments_read_only(self):
        """Test argv cannot be modified by consumers."""
        arguments = ParsedArguments({"name": "CLI"})
        assert arguments.argv["name"] == "CLI"
        with pytest.raises(TypeError):
            arguments.argv["name"] = "other"

    def test_arguments_update(self):
        """Test update replaces the parsed values."""
        arguments = ParsedArguments()
        assert arguments.argv.get("name") is None
        arguments.update({"name": "CLI"})
        assert arguments.argv["name"] == "CLI"
