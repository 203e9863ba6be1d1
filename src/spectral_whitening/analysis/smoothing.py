"""Centered sliding-mean smoother used on amplitude spectra."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Literal

import numpy as np
from scipy import ndimage

from spectral_whitening.utils.validation import as_1d_array

EdgeMode = Literal["truncate", "pad", "nearest", "reflect", "wrap"]

_NDIMAGE_MODES: dict[str, str] = {
    "pad": "constant",
    "nearest": "nearest",
    "reflect": "reflect",
    "wrap": "wrap",
}


@dataclass(frozen=True)
class SmootherOptions:
    """Edge handling for :func:`sliding_mean`.

    ``"truncate"`` shrinks the window at the ends so only available points
    are averaged.  The other modes extend the series first: ``"pad"`` with
    ``pad_value``, ``"nearest"`` by repeating the end points, ``"reflect"``
    by mirroring, ``"wrap"`` circularly.
    """

    edge: EdgeMode = "truncate"
    pad_value: float = 0.0

    def __post_init__(self) -> None:
        edge = str(self.edge).lower()
        if edge != "truncate" and edge not in _NDIMAGE_MODES:
            raise ValueError(
                f"Unsupported edge mode {self.edge!r}. "
                "Use one of: truncate, pad, nearest, reflect, wrap."
            )
        object.__setattr__(self, "edge", edge)
        object.__setattr__(self, "pad_value", float(self.pad_value))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> SmootherOptions:
        """Build options from keyword arguments, rejecting unknown keys."""

        if not options:
            return cls()
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown smoother option(s): {unknown}")
        return cls(**dict(options))


def sliding_mean(
        values: np.ndarray,
        half_width: int,
        *,
        edge: EdgeMode = "truncate",
        pad_value: float = 0.0,
) -> np.ndarray:
    """Return the centered moving average of ``values``.

    Output position ``i`` is the mean of ``values[i - half_width : i + half_width + 1]``
    with the ends handled according to ``edge`` (see :class:`SmootherOptions`).
    The output has the same length as the input; ``half_width=0`` returns a copy.
    """

    samples = as_1d_array(values, "values", dtype=float)
    options = SmootherOptions(edge=edge, pad_value=pad_value)
    h = int(half_width)
    if h != half_width or h < 0:
        raise ValueError("half_width must be a non-negative integer.")
    if h == 0:
        return samples.copy()

    if options.edge == "truncate":
        n = samples.size
        size = 2 * h + 1
        totals = ndimage.uniform_filter1d(samples, size=size, mode="constant", cval=0.0) * size
        index = np.arange(n)
        lo = np.maximum(index - h, 0)
        hi = np.minimum(index + h, n - 1) + 1
        smoothed = totals / (hi - lo)
        # Windows holding only zeros stay exactly zero.
        nonzero = np.concatenate(([0], np.cumsum(samples != 0)))
        smoothed[(nonzero[hi] - nonzero[lo]) == 0] = 0.0
        return smoothed

    return ndimage.uniform_filter1d(
        samples,
        size=2 * h + 1,
        mode=_NDIMAGE_MODES[options.edge],
        cval=options.pad_value,
    )


__all__ = ["EdgeMode", "SmootherOptions", "sliding_mean"]
