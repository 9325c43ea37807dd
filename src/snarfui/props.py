"""Best-effort property assignment on live widgets."""

from __future__ import annotations

import logging

from snarfui._naming import snakeify
from snarfui.errors import PropertySetError

logger = logging.getLogger("snarfui.props")


def set_property(target: object, name: str, value: object) -> bool:
    """Set ``name`` on ``target``, trying ``set_<name>()`` then an own attribute.

    Failures are logged, never raised. Returns whether the value was applied.
    """
    attr = snakeify(name)
    try:
        setter = getattr(target, f"set_{attr}", None)
        if callable(setter):
            setter(value)
            return True

        if attr in getattr(target, "__dict__", ()):
            setattr(target, attr, value)
            return True
    except Exception:
        logger.exception("%s", PropertySetError(target, name))
        return False

    logger.error("%s", PropertySetError(target, name))
    return False
