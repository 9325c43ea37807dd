"""Observable value sources: the minimal contract the construction layer consumes.

Every source exposes ``get()`` and ``subscribe(callback) -> Disposer``.

- Variable: a settable value. Notifies subscribers when it changes.
- Derived: a lazy fan-in join over several sources.
- Binding: a read-only, optionally transformed view over any source. This is
  the type the construction layer recognises as "reactive" in a config.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Protocol, TypeVar

from snarfui.scheduler import dispatch

T = TypeVar("T")
U = TypeVar("U")

Disposer = Callable[[], None]

_UNSET = object()


class Subscribable(Protocol[T]):
    def get(self) -> T: ...

    def subscribe(self, callback: Callable[[T], None]) -> Disposer: ...


class _Subscribers(Generic[T]):
    """Callback list shared by Variable and Derived."""

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        self._callbacks: list[Callable[[T], None]] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def add(self, callback: Callable[[T], None]) -> Disposer:
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass  # already removed

        return _unsubscribe

    def emit(self, value: T) -> None:
        for cb in list(self._callbacks):
            cb(value)


class Variable(Generic[T]):
    """A single settable value with change notification."""

    __slots__ = ("_value", "_subscribers")

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: _Subscribers[T] = _Subscribers()

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Write a new value. Auto-marshals from background threads."""
        dispatch(self._set_direct, value)

    def _set_direct(self, value: T) -> None:
        old = self._value
        if old is not value and old != value:
            self._value = value
            self._subscribers.emit(value)

    def subscribe(self, callback: Callable[[T], None]) -> Disposer:
        """Register a callback for future changes. Returns a function that removes it."""
        return self._subscribers.add(callback)

    def bind(self) -> Binding[T]:
        return Binding(self)

    @staticmethod
    def derive(sources: Iterable[Subscribable], fn: Callable[..., U]) -> Derived[U]:
        return Derived(sources, fn)

    def __repr__(self) -> str:
        return f"Variable({self._value!r})"


class Derived(Generic[T]):
    """A value recombined from several sources whenever any of them changes.

    Lazy: ``fn`` does not run until the first get() or subscribe(). Upstream
    subscriptions exist only while this source has subscribers of its own.
    """

    __slots__ = ("_sources", "_fn", "_value", "_subscribers", "_upstream")

    def __init__(self, sources: Iterable[Subscribable], fn: Callable[..., T]) -> None:
        self._sources = list(sources)
        self._fn = fn
        self._value: Any = _UNSET
        self._subscribers: _Subscribers[T] = _Subscribers()
        self._upstream: list[Disposer] = []

    def get(self) -> T:
        if not self._upstream:
            # Not connected, so nothing tells us when a cached value goes stale.
            return self._recompute()
        return self._value

    def _recompute(self) -> T:
        self._value = self._fn(*(source.get() for source in self._sources))
        return self._value

    def _on_upstream(self, _value: Any) -> None:
        old = self._value
        new = self._recompute()
        if old is not new and old != new:
            self._subscribers.emit(new)

    def subscribe(self, callback: Callable[[T], None]) -> Disposer:
        if not self._upstream:
            self._connect()
        remove = self._subscribers.add(callback)

        def _unsubscribe() -> None:
            remove()
            if not self._subscribers:
                self._disconnect()

        return _unsubscribe

    def _connect(self) -> None:
        """Subscribe to every source, or to none of them if one fails."""
        upstream: list[Disposer] = []
        try:
            for source in self._sources:
                upstream.append(source.subscribe(self._on_upstream))
        except BaseException:
            for dispose in reversed(upstream):
                dispose()
            raise
        self._upstream = upstream
        self._recompute()

    def _disconnect(self) -> None:
        for dispose in self._upstream:
            dispose()
        self._upstream = []
        self._value = _UNSET

    def bind(self) -> Binding[T]:
        return Binding(self)

    def __repr__(self) -> str:
        state = "connected" if self._upstream else "idle"
        return f"Derived({getattr(self._fn, '__name__', self._fn)!r}, {state})"


def _identity(value):
    return value


class Binding(Generic[T]):
    """Read-only view of a source, passed through ``transform``.

    map() stacks another transform on the same source, so a mapped binding
    subscribes to the underlying source directly.
    """

    __slots__ = ("_source", "_transform")

    def __init__(self, source: Subscribable, transform: Callable[[Any], T] = _identity) -> None:
        self._source = source
        self._transform = transform

    def get(self) -> T:
        return self._transform(self._source.get())

    def subscribe(self, callback: Callable[[T], None]) -> Disposer:
        transform = self._transform
        return self._source.subscribe(lambda value: callback(transform(value)))

    def map(self, fn: Callable[[T], U]) -> Binding[U]:
        transform = self._transform
        if transform is _identity:
            return Binding(self._source, fn)
        return Binding(self._source, lambda value: fn(transform(value)))

    def __repr__(self) -> str:
        return f"Binding({self._source!r})"


def bind(source: Subscribable[T]) -> Binding[T]:
    """Wrap any source as a Binding. Bindings are returned unchanged."""
    if isinstance(source, Binding):
        return source
    return Binding(source)


def is_binding(value: object) -> bool:
    return isinstance(value, Binding)
