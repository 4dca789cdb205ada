from __future__ import annotations

import datetime as _dt
import logging
import operator
from typing import Any, ClassVar, Union

import numpy as np

from .._array import IntLike, as_int64, check_range, unwrap
from .._exceptions import ChronoRangeError
from .._index import IndexOrdered
from .._text import split_digits

logger = logging.getLogger(__name__)

Span = Union[_dt.timedelta, np.timedelta64]

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR  # 3600
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY        # 86400

MIN_SECOND_INDEX = 0
MAX_SECOND_INDEX = SECONDS_PER_DAY - 1

# numpy.timedelta64 units: seconds per tick for units of a second or
# coarser, ticks per second for finer ones.  Years and months have no
# fixed length and are rejected.
_SECONDS_PER_TICK = {"W": 7 * SECONDS_PER_DAY, "D": SECONDS_PER_DAY, "h": SECONDS_PER_HOUR,
                     "m": SECONDS_PER_MINUTE, "s": 1}
_TICKS_PER_SECOND = {"ms": 10**3, "us": 10**6, "ns": 10**9,
                     "ps": 10**12, "fs": 10**15, "as": 10**18}


def to_second_index(hour: IntLike, minute: IntLike, second: IntLike) -> IntLike:
    """Seconds since midnight; every field is range-checked."""
    h = as_int64("hour", hour, 0, HOURS_PER_DAY - 1)
    m = as_int64("minute", minute, 0, MINUTES_PER_HOUR - 1)
    s = as_int64("second", second, 0, SECONDS_PER_MINUTE - 1)
    check_range("hour", h, 0, HOURS_PER_DAY - 1)
    check_range("minute", m, 0, MINUTES_PER_HOUR - 1)
    check_range("second", s, 0, SECONDS_PER_MINUTE - 1)
    return unwrap(h * SECONDS_PER_HOUR + m * SECONDS_PER_MINUTE + s)


def from_second_index(second_index: IntLike) -> tuple[IntLike, IntLike, IntLike]:
    """``(hour, minute, second)`` of a second index; indices wrap at midnight."""
    i = np.asarray(second_index, dtype=np.int64)
    second = i % SECONDS_PER_MINUTE
    minute = i // SECONDS_PER_MINUTE % MINUTES_PER_HOUR
    hour = i // SECONDS_PER_HOUR % HOURS_PER_DAY
    return unwrap(hour), unwrap(minute), unwrap(second)


def _whole_seconds(span: Any) -> int:
    # Exact integer arithmetic in the span's own unit.
    # Fractional seconds are truncated toward zero, whatever the sign.
    if isinstance(span, _dt.timedelta):
        ticks = span // _dt.timedelta(microseconds=1)
        per_second = 1_000_000
    elif isinstance(span, np.timedelta64):
        if np.isnat(span):
            raise ValueError("Cannot add NaT to a Time.")
        unit, step = np.datetime_data(span.dtype)
        ticks = int(span.astype(np.int64)) * step
        if unit in _SECONDS_PER_TICK:
            return ticks * _SECONDS_PER_TICK[unit]
        if unit not in _TICKS_PER_SECOND:
            raise TypeError(f"Cannot convert a timedelta64 in unit {unit!r} to seconds.")
        per_second = _TICKS_PER_SECOND[unit]
    else:
        raise TypeError(f"Expected a timedelta, got {type(span).__name__}.")

    seconds = abs(ticks) // per_second
    return seconds if ticks >= 0 else -seconds


class Time(IndexOrdered):
    """
    Time of day with one-second resolution, stored as seconds since midnight.

    Unlike :class:`~chrono.date.Date`, building from a raw index and all
    arithmetic wrap around midnight instead of raising.
    """

    __slots__ = ()

    MIN: ClassVar[Time]
    MAX: ClassVar[Time]

    def __init__(self, hour: int, minute: int, second: int) -> None:
        self._index = to_second_index(
            operator.index(hour), operator.index(minute), operator.index(second)
        )

    @classmethod
    def from_index(cls, second_index: int) -> Time:
        """
        Build from seconds since midnight, reduced modulo one day.  Python's
        floored modulo keeps negative input in range: ``-1`` is 23:59:59.
        """
        second_index = operator.index(second_index)
        wrapped = second_index % SECONDS_PER_DAY
        if wrapped != second_index:
            logger.debug("Wrapped second index %d to %d.", second_index, wrapped)
        time = cls.__new__(cls)
        time._index = wrapped
        return time

    @classmethod
    def parse(cls, text: str) -> Time:
        """Parse six digits laid out as ``HHMMSS``."""
        hour, minute, second = split_digits(text, (2, 2, 2))
        return cls(hour, minute, second)

    @classmethod
    def from_datetime(cls, value: _dt.datetime | _dt.time | np.datetime64) -> Time:
        """Clock part of a ``datetime``/``time`` or ``numpy.datetime64``; sub-seconds dropped."""
        if isinstance(value, np.datetime64):
            if np.isnat(value):
                raise ChronoRangeError("second_index", "NaT", MIN_SECOND_INDEX, MAX_SECOND_INDEX)
            seconds = int(value.astype("datetime64[s]").astype(np.int64))
            return cls.from_index(seconds)
        if isinstance(value, (_dt.datetime, _dt.time)):
            return cls(value.hour, value.minute, value.second)
        raise TypeError(f"Expected a datetime, time or datetime64, got {type(value).__name__}.")

    # ── fields ───────────────────────────────────────────────────────────

    @property
    def second_index(self) -> int:
        return self._index

    @property
    def hour(self) -> int:
        return self._index // SECONDS_PER_HOUR % HOURS_PER_DAY

    @property
    def minute(self) -> int:
        return self._index // SECONDS_PER_MINUTE % MINUTES_PER_HOUR

    @property
    def second(self) -> int:
        return self._index % SECONDS_PER_MINUTE

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(self, span: Span) -> Time:
        return type(self).from_index(self._index + _whole_seconds(span))

    def subtract(self, span: Span) -> Time:
        return type(self).from_index(self._index - _whole_seconds(span))

    def add_seconds(self, seconds: int) -> Time:
        return type(self).from_index(self._index + operator.index(seconds))

    def add_minutes(self, minutes: int) -> Time:
        return self.add_seconds(operator.index(minutes) * SECONDS_PER_MINUTE)

    def add_hours(self, hours: int) -> Time:
        return self.add_seconds(operator.index(hours) * SECONDS_PER_HOUR)

    def __add__(self, span: Any) -> Time:
        if not isinstance(span, (_dt.timedelta, np.timedelta64)):
            return NotImplemented
        return self.add(span)

    __radd__ = __add__

    def __sub__(self, span: Any) -> Time:
        if not isinstance(span, (_dt.timedelta, np.timedelta64)):
            return NotImplemented
        return self.subtract(span)

    # ── conversion ───────────────────────────────────────────────────────

    def to_datetime(self) -> _dt.datetime:
        return _dt.datetime(1, 1, 1, self.hour, self.minute, self.second)

    def to_time(self) -> _dt.time:
        return _dt.time(self.hour, self.minute, self.second)

    def to_timedelta(self) -> _dt.timedelta:
        return _dt.timedelta(hours=self.hour, minutes=self.minute, seconds=self.second)

    def format(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second})"


Time.MIN = Time.from_index(MIN_SECOND_INDEX)
Time.MAX = Time.from_index(MAX_SECOND_INDEX)
