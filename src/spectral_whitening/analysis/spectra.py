from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from spectral_whitening.analysis.representation import as_complex_spectrum, forward_transform
from spectral_whitening.dataio.records import Record
from spectral_whitening.utils.validation import as_1d_array

SUMMARY_COLUMNS: tuple[str, ...] = (
    "index",
    "name",
    "representation",
    "n_samples",
    "flatness_before",
    "flatness_after",
    "min",
    "max",
    "mean",
)


def amplitude_spectrum(
        record: Record,
        *,
        pad_to_power_of_two: bool = True,
) -> tuple[np.ndarray, np.ndarray]:
    """Return the one-sided amplitude spectrum of any supported record.

    Parameters
    ----------
    record : Record
        Sampled or spectral record.  Sampled records are transformed with
        :func:`~spectral_whitening.analysis.representation.forward_transform`.
    pad_to_power_of_two : bool
        Padding policy for sampled records.

    Returns
    -------
    frequency_hz : ndarray
        Bin frequencies starting at 0 Hz.
    amplitude : ndarray
        Spectral amplitude per bin.
    """

    spectral = record
    if record.representation.is_sampled:
        spectral = forward_transform(record, pad_to_power_of_two=pad_to_power_of_two)
    spectrum = as_complex_spectrum(spectral)
    frequency_hz = np.arange(spectrum.size, dtype=float) * spectral.sample_spacing
    return frequency_hz, np.abs(spectrum)


def spectral_flatness(amplitude: np.ndarray, *, exclude_dc: bool = True) -> float:
    """Geometric over arithmetic mean of the power spectrum.

    1.0 for a perfectly flat spectrum, tending to 0 for a peaked one.  Zero
    power bins make the geometric mean (and the result) zero.
    """

    values = as_1d_array(amplitude, "amplitude", dtype=float)
    if exclude_dc and values.size > 1:
        values = values[1:]
    power = values ** 2
    arithmetic = float(np.mean(power))
    if arithmetic <= 0.0:
        return 0.0
    if np.any(power <= 0.0):
        return 0.0
    geometric = float(np.exp(np.mean(np.log(power))))
    return geometric / arithmetic


def whitening_summary(
        before: Sequence[Record],
        after: Sequence[Record],
) -> pd.DataFrame:
    """Tabulate spectral flatness before and after whitening, one row per record."""

    if len(before) != len(after):
        raise ValueError("before and after must contain the same number of records.")

    rows: list[dict[str, object]] = []
    for index, (original, whitened) in enumerate(zip(before, after)):
        _, amplitude_before = amplitude_spectrum(original)
        _, amplitude_after = amplitude_spectrum(whitened)
        rows.append(
            {
                "index": index,
                "name": whitened.name,
                "representation": whitened.representation.name,
                "n_samples": whitened.n_samples,
                "flatness_before": spectral_flatness(amplitude_before),
                "flatness_after": spectral_flatness(amplitude_after),
                "min": whitened.stats.min,
                "max": whitened.stats.max,
                "mean": whitened.stats.mean,
            }
        )
    return pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS))


__all__ = [
    "SUMMARY_COLUMNS",
    "amplitude_spectrum",
    "spectral_flatness",
    "whitening_summary",
]
