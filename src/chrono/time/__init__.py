# src/chrono/time/__init__.py
"""
chrono.time
~~~~~~~~~~~

Time of day as a single second index (seconds since midnight, 0–86399).
Raw indices and all arithmetic wrap around midnight.

Basic usage::

    from datetime import timedelta
    from chrono.time import Time

    t = Time(23, 59, 59)
    t.add_seconds(1)                 # → Time(0, 0, 0)
    t - timedelta(hours=1.5)         # → Time(22, 29, 59)
    Time.parse("083000")             # → Time(8, 30, 0)

Public API
----------
Time               The value type.
to_second_index    (hour, minute, second) → second index.
from_second_index  second index → (hour, minute, second).
"""

from __future__ import annotations

from chrono.time.time import (
    SECONDS_PER_DAY,
    Time,
    from_second_index,
    to_second_index,
)

__all__ = [
    "SECONDS_PER_DAY",
    "Time",
    "from_second_index",
    "to_second_index",
]
