from spectral_whitening.analysis.representation import (
    as_complex_spectrum,
    forward_transform,
    inverse_transform,
    to_polar,
    to_rectangular,
    transform_length,
)
from spectral_whitening.analysis.smoothing import SmootherOptions, sliding_mean
from spectral_whitening.analysis.spectra import amplitude_spectrum, spectral_flatness, whitening_summary
from spectral_whitening.analysis.whitening import EPSILON, validate_batch, whiten, whiten_record
from spectral_whitening.analysis.windows import resolve_half_width, resolve_half_widths

__all__ = [
    "EPSILON",
    "SmootherOptions",
    "amplitude_spectrum",
    "as_complex_spectrum",
    "forward_transform",
    "inverse_transform",
    "resolve_half_width",
    "resolve_half_widths",
    "sliding_mean",
    "spectral_flatness",
    "to_polar",
    "to_rectangular",
    "transform_length",
    "validate_batch",
    "whiten",
    "whiten_record",
    "whitening_summary",
]
