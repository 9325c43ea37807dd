"""Child placement: replace a container's children with a new full set.

A container declares how it accepts children by inheriting one of the
contracts below. They are plain base classes so they mix into toolkit
classes that bring their own metaclass. set_children() checks them in a
fixed priority order: OrderedBox, CenterSlots, OverlayBox, then Container.

There is no diffing. Every call detaches the old set and places the new one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from snarfui.config import get_config
from snarfui.errors import UnsupportedContainerError

if TYPE_CHECKING:
    from snarfui.toolkit import Toolkit

logger = logging.getLogger("snarfui.containers")


class Container:
    """Generic container: children are added and removed one at a time."""

    def get_children(self) -> list[Any]:
        raise NotImplementedError

    def add_child(self, child: Any) -> None:
        raise NotImplementedError

    def remove_child(self, child: Any) -> None:
        raise NotImplementedError


class Bin(Container):
    """Container holding at most one child."""

    def get_child(self) -> Any | None:
        raise NotImplementedError

    def get_children(self) -> list[Any]:
        child = self.get_child()
        return [] if child is None else [child]


class OrderedBox:
    """Container with its own atomic replace-all operation."""

    def set_children(self, children: list[Any]) -> None:
        raise NotImplementedError


class CenterSlots(Container):
    """Container with start, center and end slots.

    Subclasses provide ``start_widget``, ``center_widget`` and ``end_widget``
    as settable attributes; assigning None clears a slot.
    """

    start_widget: Any
    center_widget: Any
    end_widget: Any


class OverlayBox(Bin):
    """A primary child with a list of overlays stacked on top of it."""

    def set_child(self, child: Any | None) -> None:
        raise NotImplementedError

    def set_overlays(self, overlays: list[Any]) -> None:
        raise NotImplementedError


def flatten(children: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples to any depth, dropping None."""
    flat: list[Any] = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flat.extend(flatten(child))
        elif child is not None:
            flat.append(child)
    return flat


def set_children(parent: Any, children: Any, toolkit: Toolkit | None = None) -> None:
    """Replace the children of ``parent`` with ``children``.

    ``children`` may be a single widget or an arbitrarily nested list.
    Non-widget values are turned into labels via the toolkit, which defaults
    to ``parent.toolkit``.
    """
    toolkit = toolkit if toolkit is not None else parent.toolkit
    widgets = [
        child if toolkit.is_widget(child) else toolkit.make_label(str(child))
        for child in flatten([children])
    ]

    # remove
    if isinstance(parent, Bin):
        current = parent.get_child()
        if current is not None:
            parent.remove_child(current)
    elif isinstance(parent, Container) and not isinstance(parent, OrderedBox):
        for current in list(parent.get_children()):
            parent.remove_child(current)

    # place
    if isinstance(parent, OrderedBox):
        parent.set_children(widgets)

    elif isinstance(parent, CenterSlots):
        slots = widgets + [None] * (3 - len(widgets))
        parent.start_widget = slots[0]
        parent.center_widget = slots[1]
        parent.end_widget = slots[2]

    elif isinstance(parent, OverlayBox):
        child, *overlays = widgets or [None]
        parent.set_child(child)
        parent.set_overlays(overlays)

    elif isinstance(parent, Container):
        for child in widgets:
            parent.add_child(child)

    elif widgets:
        if get_config().strict_containers:
            raise UnsupportedContainerError(parent)
        logger.warning(
            "%s supports none of the child placement contracts, dropping %d children",
            type(parent).__name__, len(widgets),
        )
