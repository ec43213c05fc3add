from enum import Enum


class ErrorMode(str, Enum):
    RAISE = "raise"
    WARN = "warn"
    IGNORE = "ignore"


class InvalidTypeError(TypeError):
    """Raised when an input is not a well-formed, non-empty matrix-like structure."""


class ShapeMismatchError(ValueError):
    """Raised when matrix rows differ in length or a target shape does not fit the data."""
