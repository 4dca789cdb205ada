# src/chrono/date/__init__.py
"""
chrono.date
~~~~~~~~~~~

Calendar dates as a single day index.  Day 0 is 0001-01-01 of the proleptic
Gregorian calendar and the last valid day, 9999-12-31, is index 3652058.

Basic usage::

    from chrono.date import Date

    d = Date(2024, 1, 31)
    d.add_months(1)            # → Date(2024, 2, 29)
    Date.parse("20240229")     # → Date(2024, 2, 29)
    str(d)                     # → '2024-01-31'

NumPy arrays are accepted by the conversion functions::

    import numpy as np
    from chrono.date import from_day_index, to_day_index

    years, months, days, year_days = from_day_index(np.arange(0, 3652059, 1000))
    to_day_index(years, months, days)

Public API
----------
Date            The value type.
is_leap_year    Gregorian leap-year rule.
month_length    Days in a given month of a given year.
to_day_index    (year, month, day) → day index.
from_day_index  day index → (year, month, day, day of year).
"""

from __future__ import annotations

from chrono.date.date import (
    MAX_DAY_INDEX,
    MIN_DAY_INDEX,
    Date,
    from_day_index,
    is_leap_year,
    month_length,
    to_day_index,
)

__all__ = [
    "Date",
    "MAX_DAY_INDEX",
    "MIN_DAY_INDEX",
    "from_day_index",
    "is_leap_year",
    "month_length",
    "to_day_index",
]
