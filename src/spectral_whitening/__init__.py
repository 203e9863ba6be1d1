"""Spectral whitening of evenly sampled signal records."""

from spectral_whitening.analysis.whitening import whiten, whiten_record
from spectral_whitening.config import WhitenConfig
from spectral_whitening.dataio.records import Record, Representation, WidthUnit

__all__ = [
    "Record",
    "Representation",
    "WhitenConfig",
    "WidthUnit",
    "whiten",
    "whiten_record",
]
