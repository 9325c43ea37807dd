"""Tests for exec_ and exec_async."""

import sys

import pytest

from snarfui import CommandError
from snarfui.process import exec_, exec_async

PY = sys.executable


class TestExec:
    def test_returns_stdout(self):
        assert exec_([PY, "-c", "print('hello')"]) == "hello"

    def test_string_command_is_split(self):
        assert exec_(f"{PY} -c \"print('a b')\"") == "a b"

    def test_non_zero_exit(self):
        with pytest.raises(CommandError) as info:
            exec_([PY, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"])
        assert info.value.returncode == 3
        assert info.value.stderr == "bad"

    def test_missing_program(self):
        with pytest.raises(FileNotFoundError):
            exec_(["snarfui-no-such-program"])


class TestExecAsync:
    def test_resolves(self):
        future = exec_async([PY, "-c", "print(42)"])
        assert future.result(timeout=10) == "42"

    def test_rejects(self):
        future = exec_async([PY, "-c", "raise SystemExit(1)"])
        with pytest.raises(CommandError):
            future.result(timeout=10)
