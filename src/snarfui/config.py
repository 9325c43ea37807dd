"""SnarfUI configuration.

Config is frozen; configure() swaps in a new active instance.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Config:
    """Process-wide construction settings.

    Attributes:
        event_prefix: snake_case prefix marking a config key as a signal handler.
        setup_key: Config key holding the callback run after construction.
        child_keys: Keys whose bound values also drive child reconciliation.
        default_visible: Value for ``visible`` when the config omits it.
        strict_containers: Raise UnsupportedContainerError instead of logging
            when children are given to a widget with no placement contract.

    """

    event_prefix: str = "on_"
    setup_key: str = "setup"
    child_keys: frozenset[str] = frozenset({"child", "children"})
    default_visible: bool = True
    strict_containers: bool = False


_active = Config()


def get_config() -> Config:
    return _active


def configure(**changes) -> Config:
    """Replace the active config with a copy carrying ``changes``.

    Unknown keys raise TypeError.
    """
    global _active
    _active = dataclasses.replace(_active, **changes)
    return _active


def reset_config() -> None:
    global _active
    _active = Config()
