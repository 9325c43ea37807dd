"""Textual integration for SnarfUI. Opt-in, requires textual.

Textual messages are re-fired as snarfui signals named after their handler
(``Click`` -> ``click``, ``Button.Pressed`` -> ``button_pressed``), so config
keys like ``on_click`` and ``on_button_pressed`` work as expected. Unmounting
a widget destroys it, releasing every binding it holds.

    from snarfui.textual import Box, Label, use_app

    class Bar(App):
        def compose(self):
            use_app(self)
            yield Box({"class_name": "bar"}, Label({"label": clock.bind()}))
"""

from __future__ import annotations

import weakref
from typing import Any

from textual import events
from textual import containers as _containers
from textual import widgets as _widgets
from textual.message import Message
from textual.widget import Widget

from snarfui.containers import CenterSlots, Container as _Container, OrderedBox
from snarfui.scheduler import set_scheduler
from snarfui.toolkit import Toolkit
from snarfui.widget import WidgetFactory, augment


class TextualToolkit(Toolkit):
    """Toolkit operations backed by Textual's DOM API.

    Textual has no pointer-shape API, so the cursor is only recorded.
    """

    widget_type = Widget

    def __init__(self) -> None:
        self._state: weakref.WeakKeyDictionary[Widget, dict[str, Any]] = (
            weakref.WeakKeyDictionary()
        )

    def _widget_state(self, widget: Widget) -> dict[str, Any]:
        return self._state.setdefault(widget, {"css": "", "cursor": "default", "click_through": False})

    def make_label(self, text: str) -> Widget:
        return _widgets.Label(text)

    def get_class_names(self, widget: Widget) -> list[str]:
        return sorted(widget.classes)

    def set_class_names(self, widget: Widget, names: list[str]) -> None:
        widget.set_classes(" ".join(names))

    def toggle_class_name(self, widget: Widget, name: str, on: bool = True) -> None:
        widget.set_class(on, name)

    def get_css(self, widget: Widget) -> str:
        return self._widget_state(widget)["css"]

    def set_css(self, widget: Widget, css: str) -> None:
        widget.set_styles(css)
        self._widget_state(widget)["css"] = css

    def get_cursor(self, widget: Widget) -> str:
        return self._widget_state(widget)["cursor"]

    def set_cursor(self, widget: Widget, cursor: str) -> None:
        self._widget_state(widget)["cursor"] = cursor

    def get_click_through(self, widget: Widget) -> bool:
        return self._widget_state(widget)["click_through"]

    def set_click_through(self, widget: Widget, click_through: bool) -> None:
        self._widget_state(widget)["click_through"] = bool(click_through)


TOOLKIT = TextualToolkit()


class TextualReactive(_Container):
    """Signals, lifecycle and generic child placement for Textual widgets.

    Children given before the widget is mounted are queued and mounted with it.
    Once mounted, removals are staged until the next turn of the message
    loop: a child removed and added back in the same update stays mounted
    and is only moved, since Textual cannot remount a widget it is removing.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._detaching: list[Widget] = []
        self._removing: list[Widget] = []

    async def _on_message(self, message: Message) -> None:
        if isinstance(message, events.MouseEvent) and self.click_through:
            return
        await super()._on_message(message)
        if isinstance(message, events.Unmount):
            self.destroy()
        else:
            self.fire(message.handler_name.removeprefix("on_"), message)

    def get_children(self) -> list[Widget]:
        leaving = [*self._detaching, *self._removing]
        return [
            *(child for child in self.children if child not in leaving),
            *self._pending_children,
        ]

    def add_child(self, child: Widget) -> None:
        if child in self._detaching:
            self._detaching.remove(child)
            last = self.children[-1]
            if last is not child:
                self.move_child(child, after=last)
        elif self.is_attached:
            self.mount(child)
        else:
            self._pending_children.append(child)

    def remove_child(self, child: Widget) -> None:
        if child in self._pending_children:
            self._pending_children.remove(child)
        elif child in self.children and child not in self._detaching:
            if not self._detaching:
                self.call_next(self._flush_detached)
            self._detaching.append(child)

    async def _flush_detached(self) -> None:
        batch, self._detaching = self._detaching, []
        self._removing.extend(batch)
        for child in batch:
            await child.remove()
            self._removing.remove(child)

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled


class _TextLeaf:
    """``label`` property for Static-based widgets."""

    def set_label(self, text: str) -> None:
        self.update(text)


class _ButtonLabel:
    def set_label(self, text: str) -> None:
        self.label = text


class _Box(TextualReactive, OrderedBox, _containers.Vertical):
    """Vertical container whose children are replaced as a whole.

    Widgets present in both the old and new set stay mounted.
    """

    def set_children(self, children: list[Widget]) -> None:
        for child in self.get_children():
            self.remove_child(child)
        for child in children:
            self.add_child(child)


class _CenterBox(TextualReactive, CenterSlots, _containers.Horizontal):
    """Horizontal container with start, center and end slots."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._slots: dict[str, Widget | None] = {"start": None, "center": None, "end": None}

    def _set_slot(self, slot: str, widget: Widget | None) -> None:
        old = self._slots[slot]
        if old is widget:
            return
        if old is not None and old in self.get_children():
            self.remove_child(old)
        self._slots[slot] = widget
        if widget is not None:
            self.add_child(widget)

    def get_children(self) -> list[Widget]:
        return [w for w in self._slots.values() if w is not None]

    def remove_child(self, child: Widget) -> None:
        for slot, widget in self._slots.items():
            if widget is child:
                self._slots[slot] = None
        super().remove_child(child)

    @property
    def start_widget(self) -> Widget | None:
        return self._slots["start"]

    @start_widget.setter
    def start_widget(self, widget: Widget | None) -> None:
        self._set_slot("start", widget)

    @property
    def center_widget(self) -> Widget | None:
        return self._slots["center"]

    @center_widget.setter
    def center_widget(self, widget: Widget | None) -> None:
        self._set_slot("center", widget)

    @property
    def end_widget(self) -> Widget | None:
        return self._slots["end"]

    @end_widget.setter
    def end_widget(self, widget: Widget | None) -> None:
        self._set_slot("end", widget)


def widget(widget_cls: type[Widget], *mixins: type) -> WidgetFactory:
    """Factory for a reactive version of any Textual widget class."""
    base = type(widget_cls.__name__, (TextualReactive, *mixins, widget_cls), {})
    return augment(base, TOOLKIT)


def use_app(app) -> None:
    """Marshal background-thread updates onto app's thread. Call from the app thread."""
    set_scheduler(app.call_from_thread)


Box = augment(_Box, TOOLKIT, name="Box")
CenterBox = augment(_CenterBox, TOOLKIT, name="CenterBox")
Container = widget(_containers.Container)
Horizontal = widget(_containers.Horizontal)
Vertical = widget(_containers.Vertical)
Static = widget(_widgets.Static, _TextLeaf)
Label = widget(_widgets.Label, _TextLeaf)
Button = widget(_widgets.Button, _ButtonLabel)
