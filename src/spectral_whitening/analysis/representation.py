"""Conversions between sampled, rectangular and polar record representations.

Spectra are one-sided (``numpy.fft.rfft``) over an even transform length, so
a spectrum with ``n_bins`` bins always inverts over ``2 * (n_bins - 1)``
points.  Sampled records are zero-padded before the forward transform and
trimmed back to ``n_time`` after the inverse.
"""

from __future__ import annotations

import numpy as np

from spectral_whitening.dataio.records import Record, Representation
from spectral_whitening.utils.validation import as_1d_array, as_column_pair


def transform_length(n_samples: int, *, pad_to_power_of_two: bool = True) -> int:
    """Return the (even) FFT length used for a series of ``n_samples`` points."""

    n = int(n_samples)
    if n <= 0:
        raise ValueError("n_samples must be positive.")
    if pad_to_power_of_two:
        return max(2, 1 << (n - 1).bit_length())
    return n + (n % 2)


def forward_transform(record: Record, *, pad_to_power_of_two: bool = True) -> Record:
    """Transform a ``TIME``/``GENERIC_XY`` record into a ``RECT_SPECTRUM`` record.

    Parameters
    ----------
    record : Record
        Sampled record with ``sample_spacing`` in seconds.
    pad_to_power_of_two : bool
        Zero-pad to the next power of two.  Otherwise pad by at most one
        sample to reach an even length.

    Returns
    -------
    Record
        Rectangular spectrum with ``sample_spacing`` equal to the bin
        spacing in Hz and ``n_time`` equal to the input length.
    """

    _require(record, Representation.TIME, Representation.GENERIC_XY)
    series = as_1d_array(record.samples, "samples", dtype=float)
    nfft = transform_length(series.size, pad_to_power_of_two=pad_to_power_of_two)
    spectrum = np.fft.rfft(series, n=nfft)
    return record.replace(
        samples=complex_to_rectangular(spectrum),
        representation=Representation.RECT_SPECTRUM,
        sample_spacing=1.0 / (nfft * record.sample_spacing),
        n_time=series.size,
    )


def inverse_transform(record: Record) -> Record:
    """Transform a ``RECT_SPECTRUM`` record back into a ``TIME`` record."""

    _require(record, Representation.RECT_SPECTRUM)
    spectrum = rectangular_to_complex(record.samples)
    nfft = 2 * (spectrum.size - 1)
    if nfft < 2:
        raise ValueError("Spectrum needs at least 2 bins to invert.")
    n_time = nfft if record.n_time is None else record.n_time
    if n_time > nfft:
        raise ValueError(f"n_time={n_time} exceeds the transform length {nfft}.")

    series = np.fft.irfft(spectrum, n=nfft)[:n_time]
    return record.replace(
        samples=series,
        representation=Representation.TIME,
        sample_spacing=1.0 / (nfft * record.sample_spacing),
        n_time=None,
    )


def to_polar(record: Record) -> Record:
    """Convert a ``RECT_SPECTRUM`` record to ``POLAR_SPECTRUM``."""

    _require(record, Representation.RECT_SPECTRUM)
    spectrum = rectangular_to_complex(record.samples)
    return record.replace(
        samples=complex_to_polar(spectrum),
        representation=Representation.POLAR_SPECTRUM,
    )


def to_rectangular(record: Record) -> Record:
    """Convert a ``POLAR_SPECTRUM`` record to ``RECT_SPECTRUM``."""

    _require(record, Representation.POLAR_SPECTRUM)
    spectrum = polar_to_complex(record.samples)
    return record.replace(
        samples=complex_to_rectangular(spectrum),
        representation=Representation.RECT_SPECTRUM,
    )


def as_complex_spectrum(record: Record) -> np.ndarray:
    """Return the complex spectrum held by a rectangular or polar record."""

    if record.representation is Representation.RECT_SPECTRUM:
        return rectangular_to_complex(record.samples)
    if record.representation is Representation.POLAR_SPECTRUM:
        return polar_to_complex(record.samples)
    raise ValueError(f"{record.representation.name} records do not hold a spectrum.")


def rectangular_to_complex(samples: np.ndarray) -> np.ndarray:
    columns = as_column_pair(samples, "samples", dtype=float)
    return columns[:, 0] + 1j * columns[:, 1]


def polar_to_complex(samples: np.ndarray) -> np.ndarray:
    columns = as_column_pair(samples, "samples", dtype=float)
    return columns[:, 0] * np.exp(1j * columns[:, 1])


def complex_to_rectangular(spectrum: np.ndarray) -> np.ndarray:
    values = np.asarray(spectrum, dtype=np.complex128)
    return np.column_stack((values.real, values.imag))


def complex_to_polar(spectrum: np.ndarray) -> np.ndarray:
    values = np.asarray(spectrum, dtype=np.complex128)
    return np.column_stack((np.abs(values), np.angle(values)))


def _require(record: Record, *allowed: Representation) -> None:
    if record.representation not in allowed:
        names = ", ".join(rep.name for rep in allowed)
        raise ValueError(f"Expected a {names} record, got {record.representation.name}.")


__all__ = [
    "as_complex_spectrum",
    "complex_to_polar",
    "complex_to_rectangular",
    "forward_transform",
    "inverse_transform",
    "polar_to_complex",
    "rectangular_to_complex",
    "to_polar",
    "to_rectangular",
    "transform_length",
]
