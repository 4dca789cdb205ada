"""
tests/common/test_array.py

Covers:
  - int64 conversion with overflow reported as a range error
  - Range checks over scalars and arrays
  - Scalar/array unwrapping
"""

import numpy as np
import pytest

from chrono import ChronoRangeError
from chrono._array import as_int64, check_range, unwrap


class TestAsInt64:

    def test_scalar_and_list(self):
        assert as_int64("year", 2024, 1, 9999).dtype == np.int64
        np.testing.assert_array_equal(as_int64("year", [1, 2], 1, 9999), [1, 2])

    @pytest.mark.parametrize("value", [2**70, -2**70])
    def test_overflow_is_range_error(self, value):
        with pytest.raises(ChronoRangeError) as exc:
            as_int64("hour", value, 0, 23)
        assert exc.value.field == "hour"
        assert exc.value.value == value
        assert (exc.value.low, exc.value.high) == (0, 23)


class TestCheckRange:

    def test_in_range_passes(self):
        check_range("month", np.array([1, 12]), 1, 12)
        check_range("month", np.asarray(6), 1, 12)

    def test_reports_first_offender(self):
        with pytest.raises(ChronoRangeError) as exc:
            check_range("month", np.array([1, 13, 0]), 1, 12)
        assert exc.value.value == 13


class TestUnwrap:

    def test_zero_dim_becomes_int(self):
        assert unwrap(np.asarray(5)) == 5
        assert isinstance(unwrap(np.int64(5)), int)

    def test_array_kept(self):
        a = np.arange(3)
        assert unwrap(a) is a
