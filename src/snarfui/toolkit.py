"""Toolkit: the per-widget query/update operations a widget library provides.

The construction layer never talks to a concrete widget library directly.
Each augmented class carries a Toolkit; see snarfui.textual for the Textual one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class Toolkit(ABC):
    """Capability set for one widget library."""

    #: Base class of every widget in the library.
    widget_type: ClassVar[type]

    def is_widget(self, obj: object) -> bool:
        return isinstance(obj, self.widget_type)

    @abstractmethod
    def make_label(self, text: str) -> Any:
        """Create the leaf widget used for non-widget children."""

    @abstractmethod
    def get_class_names(self, widget: Any) -> list[str]: ...

    @abstractmethod
    def set_class_names(self, widget: Any, names: list[str]) -> None: ...

    def toggle_class_name(self, widget: Any, name: str, on: bool = True) -> None:
        names = [n for n in self.get_class_names(widget) if n != name]
        if on:
            names.append(name)
        self.set_class_names(widget, names)

    @abstractmethod
    def get_css(self, widget: Any) -> str: ...

    @abstractmethod
    def set_css(self, widget: Any, css: str) -> None: ...

    @abstractmethod
    def get_cursor(self, widget: Any) -> str: ...

    @abstractmethod
    def set_cursor(self, widget: Any, cursor: str) -> None: ...

    @abstractmethod
    def get_click_through(self, widget: Any) -> bool: ...

    @abstractmethod
    def set_click_through(self, widget: Any, click_through: bool) -> None: ...
