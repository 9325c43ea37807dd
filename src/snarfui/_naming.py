"""Property-name style conversion."""

import re

_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snakeify(name: str) -> str:
    """``clickThrough`` / ``click-through`` -> ``click_through``."""
    return _BOUNDARY.sub("_", name).replace("-", "_").lower()

