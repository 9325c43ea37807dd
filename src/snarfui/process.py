"""Run external commands for string-valued signal handlers.

exec_async() runs the command on a daemon thread (see snarfx.watch for the
same thread lifecycle) and returns a Future resolved with its stdout.
"""

from __future__ import annotations

import shlex
import subprocess
from concurrent.futures import Future
from threading import Thread

from snarfui.errors import CommandError


def _argv(command: str | list[str]) -> list[str]:
    if isinstance(command, str):
        return shlex.split(command)
    return [str(arg) for arg in command]


def exec_(command: str | list[str]) -> str:
    """Run command and return its stdout without the trailing newline.

    Raises CommandError on a non-zero exit status.
    """
    argv = _argv(command)
    result = subprocess.run(argv, capture_output=True, text=True)
    if result.returncode != 0:
        raise CommandError(argv, result.returncode, result.stderr.strip())
    return result.stdout.rstrip("\n")


def exec_async(command: str | list[str]) -> Future[str]:
    """Run command on a daemon thread. Never blocks the caller."""
    future: Future[str] = Future()

    def _run() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(exec_(command))
        except BaseException as exc:
            future.set_exception(exc)

    Thread(target=_run, daemon=True).start()
    return future
