"""hook(): tie a widget to an external event or value source for its lifetime.

The caller states which kind of source it passes:

    widget.hook(EventSource(player, "changed"), lambda self, *args: ...)
    widget.hook(ValueSource(volume), lambda self, value: ...)

Either way the subscription is released when the widget is destroyed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, TypeVar, Union

from snarfui.binding import Disposer, Subscribable
from snarfui.signals import DESTROY

W = TypeVar("W")


class Connectable(Protocol):
    def connect(self, signal: str, handler: Callable[..., object]) -> int: ...

    def disconnect(self, handler_id: int) -> None: ...


@dataclass(frozen=True, slots=True)
class EventSource:
    """A named signal on an emitter. Handlers get ``(emitter, *args)``."""

    emitter: Connectable
    signal: str


@dataclass(frozen=True, slots=True)
class ValueSource:
    """A value source; the callback gets every new value."""

    source: Subscribable


Source = Union[EventSource, ValueSource]


def _release_once(release: Disposer) -> Callable[..., None]:
    done = False

    def _on_destroy(*_args: Any) -> None:
        nonlocal done
        if not done:
            done = True
            release()

    return _on_destroy


def hook(owner: W, source: Source, callback: Callable[..., object]) -> W:
    """Route notifications from source to ``callback(owner, ...)`` until owner is destroyed."""
    if isinstance(source, EventSource):
        emitter = source.emitter
        handler_id = emitter.connect(
            source.signal, lambda _emitter, *args: callback(owner, *args)
        )

        def release() -> None:
            emitter.disconnect(handler_id)

    elif isinstance(source, ValueSource):
        release = source.source.subscribe(lambda *args: callback(owner, *args))
    else:
        raise TypeError(
            f"hook() expects an EventSource or ValueSource, got {type(source).__name__}"
        )

    owner.connect(DESTROY, _release_once(release))
    return owner
