"""Reactive widget classes and the factories that build them.

augment(SomeWidget, toolkit) returns a WidgetFactory. The factory's class is
a subclass of SomeWidget with ReactiveWidget mixed in; SomeWidget itself is
left untouched.

    Box = augment(MyBox, toolkit)
    bar = Box({"class_name": "bar", "spacing": 4}, clock, battery)
    bar = Box.build({"class_name": "bar"}, [clock, battery])
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Generic, Iterable, Mapping, TypeVar

from snarfui.construct import construct
from snarfui.hook import Source, hook
from snarfui.signals import SignalEmitter
from snarfui.toolkit import Toolkit

W = TypeVar("W")


class ReactiveWidget(SignalEmitter):
    """Mixin adding style, cursor and lifecycle helpers to a toolkit widget."""

    toolkit: ClassVar[Toolkit]

    @property
    def class_name(self) -> str:
        return " ".join(self.toolkit.get_class_names(self))

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.toolkit.set_class_names(self, value.split())

    @property
    def css(self) -> str:
        return self.toolkit.get_css(self)

    @css.setter
    def css(self, value: str) -> None:
        self.toolkit.set_css(self, value)

    @property
    def cursor(self) -> str:
        return self.toolkit.get_cursor(self)

    @cursor.setter
    def cursor(self, value: str) -> None:
        self.toolkit.set_cursor(self, value)

    @property
    def click_through(self) -> bool:
        return self.toolkit.get_click_through(self)

    @click_through.setter
    def click_through(self, value: bool) -> None:
        self.toolkit.set_click_through(self, value)

    def set_class_name(self, value: str) -> None:
        self.class_name = value

    def set_css(self, value: str) -> None:
        self.css = value

    def set_cursor(self, value: str) -> None:
        self.cursor = value

    def set_click_through(self, value: bool) -> None:
        self.click_through = value

    def toggle_class_name(self, name: str, on: bool = True) -> None:
        self.toolkit.toggle_class_name(self, name, on)

    def hook(self, source: Source, callback: Callable[..., object]):
        """Subscribe to source until this widget is destroyed. Returns self."""
        return hook(self, source, callback)


class WidgetFactory(Generic[W]):
    """Builds configured instances of one reactive widget class.

    ``factory(config, *children)`` and ``factory.build(config, children)``
    are equivalent.
    """

    __slots__ = ("cls",)

    def __init__(self, cls: type[W]) -> None:
        self.cls = cls

    def build(self, config: Mapping[str, Any] | None = None, children: Iterable[Any] = ()) -> W:
        return construct(self.cls(), config, children)

    def __call__(self, config: Mapping[str, Any] | None = None, *children: Any) -> W:
        return self.build(config, children)

    def __repr__(self) -> str:
        return f"WidgetFactory({self.cls.__qualname__})"


def augment(widget_cls: type, toolkit: Toolkit, *, name: str | None = None) -> WidgetFactory:
    """Create a reactive subclass of widget_cls and return its factory."""
    cls = type(
        name or widget_cls.__name__,
        (ReactiveWidget, widget_cls),
        {"toolkit": toolkit, "__module__": widget_cls.__module__},
    )
    return WidgetFactory(cls)
