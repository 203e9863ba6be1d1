"""Unit tests for shared validation helpers."""

from __future__ import annotations

import numpy as np
import pytest

from spectral_whitening.utils.validation import (
    as_1d_array,
    as_column_pair,
    broadcast_per_record,
    is_integral,
    is_positive_real,
)


def test_as_1d_array_accepts_valid_input() -> None:
    values = as_1d_array([1.0, 2.0, 3.0], "values", dtype=float)
    assert values.ndim == 1
    assert values.shape == (3,)


def test_as_1d_array_rejects_non_1d() -> None:
    with pytest.raises(ValueError, match="must be a 1D array"):
        as_1d_array(np.zeros((2, 2)), "values")


def test_as_column_pair_accepts_two_columns() -> None:
    values = as_column_pair(np.zeros((5, 2)), "samples")
    assert values.shape == (5, 2)


def test_as_column_pair_rejects_wrong_width() -> None:
    with pytest.raises(ValueError, match=r"shape \(n_bins, 2\)"):
        as_column_pair(np.zeros((5, 3)), "samples")


def test_broadcast_per_record_expands_scalars_and_singletons() -> None:
    assert broadcast_per_record(0.5, 3) == [0.5, 0.5, 0.5]
    assert broadcast_per_record("hz", 2) == ["hz", "hz"]
    assert broadcast_per_record([7], 3) == [7, 7, 7]
    assert broadcast_per_record(np.array([1.0, 2.0]), 2) == [1.0, 2.0]


def test_broadcast_per_record_rejects_other_lengths() -> None:
    assert broadcast_per_record([1, 2], 3) is None
    assert broadcast_per_record([], 3) is None


def test_is_positive_real() -> None:
    assert is_positive_real(1)
    assert is_positive_real(np.float64(0.25))
    assert not is_positive_real(0.0)
    assert not is_positive_real(-3)
    assert not is_positive_real(float("nan"))
    assert not is_positive_real(float("inf"))
    assert not is_positive_real(True)
    assert not is_positive_real("1.0")
    assert not is_positive_real(1 + 2j)
    assert not is_positive_real(10**400)


def test_is_integral() -> None:
    assert is_integral(4)
    assert is_integral(4.0)
    assert not is_integral(4.5)
