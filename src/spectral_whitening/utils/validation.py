"""Input validation helpers shared across the package."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np


def as_1d_array(values: np.ndarray, name: str, *, dtype: np.dtype | None = None) -> np.ndarray:
    """Return a validated non-empty 1D NumPy array."""

    array = np.asarray(values, dtype=dtype)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array.")
    if array.size == 0:
        raise ValueError(f"{name} cannot be empty.")
    return array


def as_column_pair(values: np.ndarray, name: str, *, dtype: np.dtype | None = None) -> np.ndarray:
    """Return a validated non-empty ``(n, 2)`` NumPy array."""

    array = np.asarray(values, dtype=dtype)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"{name} must be a 2D array with shape (n_bins, 2).")
    if array.shape[0] == 0:
        raise ValueError(f"{name} cannot be empty.")
    return array


def broadcast_per_record(values: Any, n_records: int) -> list[Any] | None:
    """Expand a scalar or length-1 sequence to ``n_records`` entries.

    Returns ``None`` when the number of supplied entries is neither 1 nor
    ``n_records`` so callers can raise their own error type.
    """

    if isinstance(values, (str, bytes)) or not isinstance(values, (Sequence, np.ndarray)):
        return [values] * n_records
    entries = list(np.ravel(values)) if isinstance(values, np.ndarray) else list(values)
    if len(entries) == 1:
        return entries * n_records
    if len(entries) == n_records:
        return entries
    return None


def is_positive_real(value: Any) -> bool:
    """True for finite, strictly positive, non-boolean real scalars."""

    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    return math.isfinite(number) and number > 0


def is_integral(value: Any) -> bool:
    """True when ``value`` is a real number with no fractional part."""

    return float(value).is_integer()


__all__ = [
    "as_1d_array",
    "as_column_pair",
    "broadcast_per_record",
    "is_integral",
    "is_positive_real",
]
