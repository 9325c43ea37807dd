"""SnarfUI error hierarchy.

All snarfui-specific errors inherit from SnarfUIError for easy catching.
"""


class SnarfUIError(Exception):
    """Base error for all snarfui operations."""


class PropertySetError(SnarfUIError):
    """A property could not be set on a widget."""

    def __init__(self, target: object, name: str) -> None:
        super().__init__(f"could not set property {name!r} on {target!r}")
        self.target = target
        self.name = name


class UnsupportedContainerError(SnarfUIError):
    """The parent widget implements none of the child placement contracts."""

    def __init__(self, container: object) -> None:
        super().__init__(
            f"{type(container).__name__} does not support setting children"
        )
        self.container = container


class CommandError(SnarfUIError):
    """A subprocess exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        detail = f": {stderr}" if stderr else ""
        super().__init__(f"{command!r} exited with status {returncode}{detail}")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
