"""Thread marshalling for callbacks that must run on the UI thread.

Call set_scheduler() once from the main/UI thread:
    snarfui.set_scheduler(app.call_from_thread)

After that, dispatch() from a background thread hands the call to the
scheduler. Calls from the scheduler thread, or made before any scheduler is
registered, run synchronously.
"""

from __future__ import annotations

import threading
from typing import Callable

_scheduler = None
_scheduler_thread = None


def set_scheduler(scheduler: Callable | None) -> None:
    """Set the global scheduler. ``None`` removes it."""
    global _scheduler, _scheduler_thread
    _scheduler = scheduler
    _scheduler_thread = threading.current_thread() if scheduler is not None else None


def dispatch(fn: Callable, *args) -> None:
    """Run fn(*args) on the scheduler thread."""
    if _scheduler is not None and threading.current_thread() != _scheduler_thread:
        _scheduler(fn, *args)
    else:
        fn(*args)
