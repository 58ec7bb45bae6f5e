"""Exceptions raised by the interval search."""

from __future__ import annotations


class CollatzSearchError(Exception):
    """Base class for every error raised by this package."""


class ArithmeticOverflowError(CollatzSearchError, OverflowError):
    """A value went above the maximum of the integer domain."""

    def __init__(self, value: int, maximum: int) -> None:
        super().__init__(f"value {value} exceeds the domain maximum {maximum}")
        self.value = value
        self.maximum = maximum


class ArithmeticUnderflowError(CollatzSearchError, ArithmeticError):
    """A value went below the minimum of the integer domain."""

    def __init__(self, value: int, minimum: int) -> None:
        super().__init__(f"value {value} is below the domain minimum {minimum}")
        self.value = value
        self.minimum = minimum


class SearchTerminatedError(CollatzSearchError, RuntimeError):
    """The searcher was stepped after it had already found a cycle."""
