"""Error taxonomy for configuration and layout resolution."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for all errors raised by svglayout.

    Attributes:
        node: Debug name of the node the error was raised for, if known
    """

    def __init__(self, message: str, node: str | None = None) -> None:
        self.node = node
        if node is not None:
            message = f"{message} (node '{node}')"
        super().__init__(message)


class ConfigurationError(LayoutError, ValueError):
    """Invalid configuration detected while constructing an element."""


class LayoutResolutionError(LayoutError, RuntimeError):
    """A size could not be resolved during the Measure phase."""


class MissingGeometryWarning(UserWarning):
    """Geometry was queried before it was resolved; a fallback value was used."""
