"""Named signals and the one-shot ``destroy`` lifecycle signal.

SignalEmitter is mixed into every augmented widget. Handlers are called as
``handler(emitter, *args)``.
"""

from __future__ import annotations

import itertools
from typing import Callable

DESTROY = "destroy"

Handler = Callable[..., object]

_handler_ids = itertools.count(1)


class SignalEmitter:
    """connect/disconnect/fire with a one-shot ``destroy`` signal."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._signal_handlers: dict[int, tuple[str, Handler]] = {}
        self._destroyed = False

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def connect(self, signal: str, handler: Handler) -> int:
        """Register handler for signal. Returns an id for disconnect().

        Connecting to ``destroy`` on an already destroyed emitter runs the
        handler immediately.
        """
        handler_id = next(_handler_ids)
        if signal == DESTROY and self._destroyed:
            handler(self)
            return handler_id
        self._signal_handlers[handler_id] = (signal, handler)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._signal_handlers.pop(handler_id, None)

    def fire(self, signal: str, *args) -> None:
        """Call every handler connected to signal, in connection order."""
        if self._destroyed:
            return
        for handler_id, (name, handler) in list(self._signal_handlers.items()):
            if name == signal and handler_id in self._signal_handlers:
                handler(self, *args)

    def destroy(self) -> None:
        """Fire ``destroy`` once, then drop every handler."""
        if self._destroyed:
            return
        handlers = [h for name, h in self._signal_handlers.values() if name == DESTROY]
        self._destroyed = True
        self._signal_handlers.clear()
        for handler in handlers:
            handler(self)
