from __future__ import annotations

from typing import Any, Union

import numpy as np

from ._exceptions import ChronoRangeError

IntLike = Union[int, "np.ndarray"]


def as_int64(field: str, values: Any, low: int, high: int) -> np.ndarray:
    """
    Integer array-like (or scalar) as ``int64``.  Values that do not fit are
    necessarily outside ``[low, high]`` and are reported as such.
    """
    try:
        return np.asarray(values, dtype=np.int64)
    except OverflowError as exc:
        raise ChronoRangeError(field, values, low, high) from exc


def check_range(field: str, values: np.ndarray, low: int, high: int) -> None:
    flat = np.atleast_1d(values)
    bad = flat[(flat < low) | (flat > high)]
    if bad.size:
        raise ChronoRangeError(field, int(bad[0]), low, high)


def unwrap(a: np.ndarray) -> IntLike:
    return int(a) if np.ndim(a) == 0 else a
