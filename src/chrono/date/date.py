from __future__ import annotations

import datetime as _dt
import logging
import operator
from typing import ClassVar

import numpy as np

from .._array import IntLike, as_int64, check_range, unwrap
from .._exceptions import ChronoRangeError
from .._index import IndexOrdered
from .._text import split_digits

logger = logging.getLogger(__name__)

MIN_YEAR = 1
MAX_YEAR = 9999
MONTHS_PER_YEAR = 12

MIN_DAY_INDEX = 0
MAX_DAY_INDEX = 3_652_058                        # 9999-12-31

DAYS_PER_YEAR = 365
DAYS_PER_4_YEARS = DAYS_PER_YEAR * 4 + 1         # 1461, fourth year is leap
DAYS_PER_CENTURY = DAYS_PER_4_YEARS * 25 - 1     # 36524, hundredth year is common
DAYS_PER_4_CENTURIES = DAYS_PER_CENTURY * 4 + 1  # 146097, four-hundredth year is leap

# Day index of 1970-01-01, the origin of numpy.datetime64.
UNIX_EPOCH_DAY_INDEX = 719_162


def _frozen(values: list[int]) -> np.ndarray:
    a = np.array(values, dtype=np.int64)
    a.setflags(write=False)
    return a


DAYS_TO_MONTH_365 = _frozen([0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365])
DAYS_TO_MONTH_366 = _frozen([0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366])

# Row 0: common year, row 1: leap year.  Indexed as [leap, month].
_DAYS_TO_MONTH = np.stack([DAYS_TO_MONTH_365, DAYS_TO_MONTH_366])
_DAYS_TO_MONTH.setflags(write=False)


# ── helpers ──────────────────────────────────────────────────────────────────

def _leap(years: np.ndarray) -> np.ndarray:
    return (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))


# ── calendar queries ─────────────────────────────────────────────────────────

def is_leap_year(year: IntLike) -> bool | np.ndarray:
    """
    Gregorian leap-year rule.  Any integer year is accepted, including zero
    and negative years of the proleptic calendar.
    """
    leap = _leap(np.asarray(year, dtype=np.int64))
    return bool(leap) if leap.ndim == 0 else leap


def month_length(year: IntLike, month: IntLike) -> IntLike:
    """Number of days in ``month`` of ``year`` (28 or 29 for February)."""
    y = np.asarray(year, dtype=np.int64)
    m = as_int64("month", month, 1, MONTHS_PER_YEAR)
    check_range("month", m, 1, MONTHS_PER_YEAR)
    leap = _leap(y).astype(np.intp)
    return unwrap(_DAYS_TO_MONTH[leap, m] - _DAYS_TO_MONTH[leap, m - 1])


# ── index <-> fields ─────────────────────────────────────────────────────────

def to_day_index(year: IntLike, month: IntLike, month_day: IntLike) -> IntLike:
    """
    Proleptic Gregorian ordinal of a calendar date, counted from
    0001-01-01 (index 0).  Scalars give an ``int``, array-likes give an
    ``int64`` array of the broadcast shape.
    """
    y, m, d = np.broadcast_arrays(
        as_int64("year", year, MIN_YEAR, MAX_YEAR),
        as_int64("month", month, 1, MONTHS_PER_YEAR),
        as_int64("month_day", month_day, 1, 31),
    )
    check_range("year", y, MIN_YEAR, MAX_YEAR)
    check_range("month", m, 1, MONTHS_PER_YEAR)

    leap = _leap(y).astype(np.intp)
    before = _DAYS_TO_MONTH[leap, m - 1]
    length = _DAYS_TO_MONTH[leap, m] - before

    bad = np.atleast_1d((d < 1) | (d > length))
    if bad.any():
        first = int(np.argmax(bad))
        raise ChronoRangeError(
            "month_day",
            int(np.atleast_1d(d)[first]),
            1,
            int(np.atleast_1d(length)[first]),
        )

    yi = y - 1
    index = yi * DAYS_PER_YEAR + yi // 4 - yi // 100 + yi // 400 + before + (d - 1)
    return unwrap(index)


def from_day_index(
    day_index: IntLike,
) -> tuple[IntLike, IntLike, IntLike, IntLike]:
    """
    Decompose a day index into ``(year, month, month_day, year_day)``.

    The year is found by peeling off whole 400-, 100-, 4- and 1-year
    blocks; the month by a shift-based estimate that never overshoots,
    followed by a short forward scan over the month table.
    """
    i = as_int64("day_index", day_index, MIN_DAY_INDEX, MAX_DAY_INDEX)
    check_range("day_index", i, MIN_DAY_INDEX, MAX_DAY_INDEX)

    n400, r = np.divmod(i, DAYS_PER_4_CENTURIES)

    # The last day of a 400-year block would otherwise count as a 5th century.
    n100 = np.minimum(r // DAYS_PER_CENTURY, 3)
    r = r - n100 * DAYS_PER_CENTURY

    n4, r = np.divmod(r, DAYS_PER_4_YEARS)

    # Same for the leap day closing a 4-year block.
    n1 = np.minimum(r // DAYS_PER_YEAR, 3)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    year_day0 = r - n1 * DAYS_PER_YEAR

    # Leap unless it is the last block of a century that is not the 400th.
    leap = ((n1 == 3) & ((n4 != 24) | (n100 == 3))).astype(np.intp)

    month = ((year_day0 + 1) >> 5) + 1
    while True:
        ahead = year_day0 >= _DAYS_TO_MONTH[leap, month]
        if not ahead.any():
            break
        month = month + ahead

    month_day = year_day0 - _DAYS_TO_MONTH[leap, month - 1] + 1
    return unwrap(year), unwrap(month), unwrap(month_day), unwrap(year_day0 + 1)


# ── value type ───────────────────────────────────────────────────────────────

class Date(IndexOrdered):
    """
    Calendar date stored as a single day index.

    Only the index is kept; year, month and day are recomputed on access.
    Instances are immutable and every arithmetic method returns a new one.
    """

    __slots__ = ()

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, month_day: int) -> None:
        self._index = to_day_index(
            operator.index(year), operator.index(month), operator.index(month_day)
        )

    @classmethod
    def from_index(cls, day_index: int) -> Date:
        day_index = operator.index(day_index)
        if not MIN_DAY_INDEX <= day_index <= MAX_DAY_INDEX:
            raise ChronoRangeError("day_index", day_index, MIN_DAY_INDEX, MAX_DAY_INDEX)
        date = cls.__new__(cls)
        date._index = day_index
        return date

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse eight digits laid out as ``YYYYMMDD``."""
        year, month, month_day = split_digits(text, (4, 2, 2))
        return cls(year, month, month_day)

    @classmethod
    def from_datetime(cls, value: _dt.date | np.datetime64) -> Date:
        """Date part of a ``datetime.date``/``datetime.datetime`` or ``numpy.datetime64``."""
        if isinstance(value, np.datetime64):
            if np.isnat(value):
                raise ChronoRangeError("day_index", "NaT", MIN_DAY_INDEX, MAX_DAY_INDEX)
            days = int(value.astype("datetime64[D]").astype(np.int64))
            return cls.from_index(days + UNIX_EPOCH_DAY_INDEX)
        if isinstance(value, _dt.date):
            return cls(value.year, value.month, value.day)
        raise TypeError(f"Expected a date or datetime64, got {type(value).__name__}.")

    is_leap_year = staticmethod(is_leap_year)
    month_length = staticmethod(month_length)

    # ── fields ───────────────────────────────────────────────────────────

    @property
    def day_index(self) -> int:
        return self._index

    @property
    def week_day(self) -> int:
        # 0 is the weekday of 0001-01-01 (a Monday).
        return self._index % 7

    @property
    def year(self) -> int:
        return from_day_index(self._index)[0]

    @property
    def month(self) -> int:
        return from_day_index(self._index)[1]

    @property
    def month_day(self) -> int:
        return from_day_index(self._index)[2]

    @property
    def year_day(self) -> int:
        return from_day_index(self._index)[3]

    # ── arithmetic ───────────────────────────────────────────────────────

    def add_days(self, days: int) -> Date:
        return type(self).from_index(self._index + operator.index(days))

    def add_months(self, months: int) -> Date:
        """
        Shift by whole months.  The day of month is clamped to the length of
        the target month, so Jan 31 + 1 month is the last day of February.
        """
        year, month, month_day, _ = from_day_index(self._index)

        year_delta, month0 = divmod(month - 1 + operator.index(months), MONTHS_PER_YEAR)
        year += year_delta
        month = month0 + 1

        if MIN_YEAR <= year <= MAX_YEAR:
            length = month_length(year, month)
            if month_day > length:
                logger.debug(
                    "Clamped day %d to %d for %04d-%02d.", month_day, length, year, month
                )
                month_day = length

        return type(self)(year, month, month_day)

    def add_years(self, years: int) -> Date:
        return self.add_months(operator.index(years) * MONTHS_PER_YEAR)

    # ── conversion ───────────────────────────────────────────────────────

    def to_datetime(self) -> _dt.datetime:
        year, month, month_day, _ = from_day_index(self._index)
        return _dt.datetime(year, month, month_day)

    def to_date(self) -> _dt.date:
        year, month, month_day, _ = from_day_index(self._index)
        return _dt.date(year, month, month_day)

    def to_datetime64(self) -> np.datetime64:
        return np.datetime64(self._index - UNIX_EPOCH_DAY_INDEX, "D")

    def format(self) -> str:
        year, month, month_day, _ = from_day_index(self._index)
        return f"{year:04d}-{month:02d}-{month_day:02d}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        year, month, month_day, _ = from_day_index(self._index)
        return f"Date({year}, {month}, {month_day})"


Date.MIN = Date.from_index(MIN_DAY_INDEX)
Date.MAX = Date.from_index(MAX_DAY_INDEX)
