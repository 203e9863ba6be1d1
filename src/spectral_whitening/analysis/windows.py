"""Resolve smoothing widths into centered half-widths in samples."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from spectral_whitening.dataio.records import WidthUnit


def resolve_half_width(width: float, unit: WidthUnit | str, sample_spacing: float) -> int:
    """Return the half-width (in samples) of a centered smoothing window.

    Parameters
    ----------
    width : float
        Window width, in Hz or in samples depending on ``unit``.
    unit : ``"hz"`` or ``"samples"``
        Units of ``width``.  Sample counts must be integral.
    sample_spacing : float
        Spacing of the smoothed axis; for a spectrum this is the bin width
        in Hz.

    Returns
    -------
    int
        ``ceil((count - 1) / 2)`` where ``count`` is the window length in
        samples.  Even counts round up to the next odd window, so
        ``width=4`` and ``width=5`` samples both give a half-width of 2.
        A physical width is converted with ``ceil(width / sample_spacing + 1)``,
        which never under-smooths.

    Raises
    ------
    ValueError
        If ``width`` or ``sample_spacing`` is not positive, or a sample
        count is fractional.
    """

    resolved_unit = WidthUnit.parse(unit)
    value = float(width)
    if not np.isfinite(value) or value <= 0.0:
        raise ValueError("width must be a positive real.")

    if resolved_unit is WidthUnit.SAMPLES:
        if not value.is_integer():
            raise ValueError("width in samples must be a positive integer.")
        count = value
    else:
        spacing = float(sample_spacing)
        if not np.isfinite(spacing) or spacing <= 0.0:
            raise ValueError("sample_spacing must be positive.")
        count = math.ceil(value / spacing + 1.0)

    return max(0, math.ceil((count - 1.0) / 2.0))


def resolve_half_widths(
        widths: Sequence[float],
        units: Sequence[WidthUnit | str],
        sample_spacings: Sequence[float],
) -> np.ndarray:
    """Resolve half-widths element-wise for equally long sequences."""

    if not len(widths) == len(units) == len(sample_spacings):
        raise ValueError("widths, units, and sample_spacings must have the same length.")
    return np.array(
        [
            resolve_half_width(width, unit, spacing)
            for width, unit, spacing in zip(widths, units, sample_spacings)
        ],
        dtype=int,
    )


__all__ = ["resolve_half_width", "resolve_half_widths"]
