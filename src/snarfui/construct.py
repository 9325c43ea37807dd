"""The construction pipeline: apply a config and children to a fresh widget.

Order of operations for construct(widget, config, children):

1. pop the ``setup`` callback, default ``visible`` to True
2. split the remaining keys into bindings, signal handlers and plain values
3. place the children (and follow them if they are reactive)
4. connect signal handlers
5. follow bound properties, applying their current values
6. assign plain values
7. call ``setup(widget)``

Every subscription made in steps 3-5 is released when the widget is destroyed.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Mapping, TypeVar

from snarfui import process
from snarfui._naming import snakeify
from snarfui.binding import Disposer, is_binding
from snarfui.config import Config, get_config
from snarfui.containers import flatten, set_children
from snarfui.errors import PropertySetError
from snarfui.merge import merge_bindings
from snarfui.props import set_property
from snarfui.scheduler import dispatch
from snarfui.signals import DESTROY

logger = logging.getLogger("snarfui.construct")

W = TypeVar("W")


def signal_name(key: str, config: Config) -> str | None:
    """``on_click`` / ``onClick`` -> ``click``; None if key is not a handler key."""
    snake = snakeify(key)
    if snake.startswith(config.event_prefix) and len(snake) > len(config.event_prefix):
        return snake[len(config.event_prefix):]
    return None


@contextmanager
def _lifetime(widget: Any) -> Iterator[Callable[[Disposer], None]]:
    """Collect disposers; bind them to widget's destroy signal if wiring succeeds.

    If the body raises, every disposer collected so far runs before the
    error propagates.
    """
    disposers: list[Disposer] = []
    try:
        yield disposers.append
    except BaseException:
        for dispose in reversed(disposers):
            dispose()
        raise
    for dispose in disposers:
        widget.connect(DESTROY, lambda _widget, dispose=dispose: dispose())


def _report_command(widget: Any, command: Any, future: Future) -> None:
    try:
        output = future.result()
    except Exception:
        logger.exception("command %r from %r failed", command, widget)
        return
    if widget.is_destroyed:
        logger.debug("%r was destroyed before %r finished, discarding output", widget, command)
        return
    logger.info("%s", output)


def command_handler(command: str | list[str]) -> Callable[..., None]:
    """Signal handler that runs command in the background and logs the outcome."""

    def _handler(widget: Any, *_args: Any) -> None:
        future = process.exec_async(command)
        future.add_done_callback(lambda f: dispatch(_report_command, widget, command, f))

    return _handler


def construct(widget: W, config: Mapping[str, Any] | None = None, children: Iterable[Any] = ()) -> W:
    """Configure a freshly created widget and return it.

    Usage:
        title = Variable("hi")
        construct(Box.cls(), {"class_name": "bar", "on_click": "notify-send hi"},
                  [title.bind(), "static text"])
    """
    cfg = get_config()
    props = dict(config or {})
    setup = props.pop(cfg.setup_key, None)
    props.setdefault("visible", cfg.default_visible)

    bindings = [(key, value) for key, value in props.items() if is_binding(value)]
    for key, _ in bindings:
        del props[key]

    handlers = []
    for key in list(props):
        signal = signal_name(key, cfg)
        if signal is not None:
            handlers.append((signal, props.pop(key)))

    with _lifetime(widget) as track:
        merged = merge_bindings(flatten(children))
        if is_binding(merged):
            set_children(widget, merged.get())
            track(merged.subscribe(lambda value: set_children(widget, value)))
        elif merged:
            set_children(widget, merged)

        for signal, handler in handlers:
            if not callable(handler):
                handler = command_handler(handler)
            handler_id = widget.connect(signal, handler)
            track(lambda handler_id=handler_id: widget.disconnect(handler_id))

        for prop, binding in bindings:
            if prop in cfg.child_keys:
                track(binding.subscribe(lambda value: set_children(widget, value)))
            track(binding.subscribe(lambda value, prop=prop: set_property(widget, prop, value)))
            set_property(widget, prop, binding.get())

    for key, value in props.items():
        try:
            setattr(widget, snakeify(key), value)
        except Exception:
            logger.exception("%s", PropertySetError(widget, key))

    if setup is not None:
        setup(widget)
    return widget
