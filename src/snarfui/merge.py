"""Combine a list holding some Bindings into one Binding over the whole list."""

from __future__ import annotations

from typing import Any

from snarfui.binding import Binding, Derived, is_binding


def merge_bindings(values: list[Any]) -> list[Any] | Binding[list[Any]]:
    """Lift a list with Binding elements into a Binding of plain lists.

    - No bindings: ``values`` itself is returned.
    - One binding: that binding, mapped so each emission is substituted back
      into its position.
    - Several: a lazy Derived over exactly those bindings, recombined on every
      emission from any of them.

    Usage:
        title = Variable("a")
        merged = merge_bindings([header, title.bind(), footer])
        merged.get()  # [header, "a", footer]
    """
    bindings = [value for value in values if is_binding(value)]

    if not bindings:
        return values

    def substitute(*latest: Any) -> list[Any]:
        it = iter(latest)
        return [next(it) if is_binding(value) else value for value in values]

    if len(bindings) == 1:
        return bindings[0].map(substitute)

    return Derived(bindings, substitute).bind()
