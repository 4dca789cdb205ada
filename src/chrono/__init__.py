# src/chrono/__init__.py
"""
chrono
~~~~~~

Compact calendar date and time-of-day value types, each backed by one
integer index.

Basic usage::

    from chrono import Date, Time

    Date(2024, 2, 29).day_index      # → 738944
    Time.parse("235959").add_seconds(1)

Public API
----------
Date               Calendar date (chrono.date).
Time               Time of day (chrono.time).
ChronoError        Base exception for all chrono errors.
ChronoRangeError   A field or index is out of range.
ChronoFormatError  Text does not match the fixed-width layout.
NullInputError     A parser received None.
"""

from __future__ import annotations

from chrono._exceptions import (
    ChronoError,
    ChronoFormatError,
    ChronoRangeError,
    NullInputError,
)
from chrono.date import Date
from chrono.time import Time

__all__ = [
    "ChronoError",
    "ChronoFormatError",
    "ChronoRangeError",
    "Date",
    "NullInputError",
    "Time",
]
