from __future__ import annotations

from typing import Any


class ChronoError(Exception):
    """Base class for all errors raised by :mod:`chrono`."""


class ChronoRangeError(ChronoError, ValueError):
    """A calendar or clock field lies outside its documented bounds."""

    def __init__(self, field: str, value: Any, low: int, high: int) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{field} out of range [{low}, {high}]; got {value!r}.")


class ChronoFormatError(ChronoError, ValueError):
    """Text handed to a parser does not have the expected fixed-width shape."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Cannot parse {text!r}: {reason}.")


class NullInputError(ChronoError, TypeError):
    """A parser received ``None`` instead of a string."""
