"""Synthetic coloured-noise records for whitening demos and tests."""

from __future__ import annotations

import numpy as np

from spectral_whitening.analysis.representation import forward_transform, to_polar
from spectral_whitening.dataio.records import Record, Representation


def generate_colored_noise(
    *,
    n_samples: int,
    sample_spacing: float = 1.0,
    spectral_slope: float = 1.0,
    std: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Generate real noise with power falling as ``1 / f**spectral_slope``.

    White Gaussian noise is shaped in the frequency domain and scaled to
    standard deviation ``std``.  ``spectral_slope=0`` returns white noise.
    """

    if n_samples <= 0:
        raise ValueError("n_samples must be positive.")
    spacing = _validate_sample_spacing(sample_spacing)
    if std < 0.0:
        raise ValueError("std must be non-negative.")

    prng = _resolve_rng(rng)
    white = prng.normal(size=n_samples)
    spectrum = np.fft.rfft(white)
    frequency_hz = np.fft.rfftfreq(n_samples, d=spacing)
    gain = np.ones_like(frequency_hz)
    gain[1:] = frequency_hz[1:] ** (-float(spectral_slope) / 2.0)
    gain[0] = 0.0
    shaped = np.fft.irfft(spectrum * gain, n=n_samples)

    spread = float(np.std(shaped))
    if spread > 0.0:
        shaped = shaped * (float(std) / spread)
    return shaped


def simulate_noise_records(
    *,
    n_records: int,
    n_samples: int,
    sample_spacing: float = 1.0,
    spectral_slope: float = 1.0,
    std: float = 1.0,
    representation: Representation | str = Representation.TIME,
    rng: np.random.Generator | int | None = None,
) -> list[Record]:
    """Build ``n_records`` coloured-noise records in the requested representation."""

    if n_records <= 0:
        raise ValueError("n_records must be positive.")
    target = Representation.parse(representation)
    if target is Representation.XYZ:
        raise ValueError("Cannot simulate XYZ records.")

    prng = _resolve_rng(rng)
    records: list[Record] = []
    for index in range(n_records):
        samples = generate_colored_noise(
            n_samples=n_samples,
            sample_spacing=sample_spacing,
            spectral_slope=spectral_slope,
            std=std,
            rng=prng,
        )
        record = Record(
            samples=samples,
            representation=Representation.TIME,
            sample_spacing=sample_spacing,
            name=f"noise_{index:03d}",
        )
        if target is Representation.GENERIC_XY:
            record = record.replace(representation=Representation.GENERIC_XY)
        elif target is Representation.RECT_SPECTRUM:
            record = forward_transform(record)
        elif target is Representation.POLAR_SPECTRUM:
            record = to_polar(forward_transform(record))
        records.append(record)
    return records


def _validate_sample_spacing(sample_spacing: float) -> float:
    spacing = float(sample_spacing)
    if spacing <= 0.0:
        raise ValueError("sample_spacing must be positive.")
    return spacing


def _resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


__all__ = ["generate_colored_noise", "simulate_noise_records"]
