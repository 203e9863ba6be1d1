"""Signal record model: representation tags, width units and the immutable Record."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

import numpy as np


class Representation(str, Enum):
    """How a record's ``samples`` are laid out and interpreted."""

    TIME = "itime"
    GENERIC_XY = "ixy"
    RECT_SPECTRUM = "irlim"
    POLAR_SPECTRUM = "iamph"
    XYZ = "ixyz"

    @classmethod
    def parse(cls, value: Representation | str) -> Representation:
        """Accept an enum member, its name, or its tag token (any case)."""

        if isinstance(value, cls):
            return value
        token = str(value).strip()
        for member in cls:
            if token.upper() == member.name or token.lower() in (member.value, member.value[1:]):
                return member
        raise ValueError(f"Unknown representation: {value!r}")

    @property
    def is_spectral(self) -> bool:
        return self in (Representation.RECT_SPECTRUM, Representation.POLAR_SPECTRUM)

    @property
    def is_sampled(self) -> bool:
        return self in (Representation.TIME, Representation.GENERIC_XY)


class WidthUnit(str, Enum):
    """Units of a smoothing width."""

    HZ = "hz"
    SAMPLES = "samples"

    @classmethod
    def parse(cls, value: WidthUnit | str) -> WidthUnit:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unit must be 'Hz' or 'samples', got {value!r}")
        token = value.strip().lower()
        for member in cls:
            if token == member.value:
                return member
        raise ValueError(f"Unit must be 'Hz' or 'samples', got {value!r}")


@dataclass(frozen=True)
class HeaderStats:
    """Dependent-variable statistics of a record's samples."""

    min: float
    max: float
    mean: float

    @classmethod
    def from_samples(cls, samples: np.ndarray) -> HeaderStats:
        values = np.asarray(samples, dtype=float)
        if values.size == 0:
            return cls(min=float("nan"), max=float("nan"), mean=float("nan"))
        return cls(
            min=float(np.min(values)),
            max=float(np.max(values)),
            mean=float(np.mean(values)),
        )


@dataclass(frozen=True, eq=False)
class Record:
    """One signal instance.

    Attributes
    ----------
    samples : ndarray
        Read-only sample array.  1-D for ``TIME``/``GENERIC_XY``; ``(n_bins, 2)``
        columns ``(real, imag)`` for ``RECT_SPECTRUM`` and ``(amplitude, phase)``
        for ``POLAR_SPECTRUM``.
    representation : Representation
        Layout tag of ``samples``.
    sample_spacing : float
        Seconds per sample for sampled records, Hz per bin for spectra.
    evenly_sampled : bool
        Whether the record is on a uniform grid.
    begin : float
        Start offset carried through unchanged.
    n_time : int or None
        Time-domain length a spectrum was computed from.
    name : str
        Free-form label used in log messages.
    stats : HeaderStats
        Recomputed from ``samples`` on every construction.
    """

    samples: np.ndarray
    representation: Representation = Representation.TIME
    sample_spacing: float = 1.0
    evenly_sampled: bool = True
    begin: float = 0.0
    n_time: int | None = None
    name: str = ""
    stats: HeaderStats = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        samples = np.array(self.samples, dtype=float, copy=True)
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "representation", Representation.parse(self.representation))

        spacing = float(self.sample_spacing)
        if not np.isfinite(spacing) or spacing <= 0.0:
            raise ValueError("sample_spacing must be a positive finite number.")
        object.__setattr__(self, "sample_spacing", spacing)
        object.__setattr__(self, "evenly_sampled", bool(self.evenly_sampled))
        object.__setattr__(self, "begin", float(self.begin))
        if self.n_time is not None:
            object.__setattr__(self, "n_time", int(self.n_time))
        object.__setattr__(self, "stats", HeaderStats.from_samples(samples))

    @property
    def n_samples(self) -> int:
        return int(self.samples.shape[0]) if self.samples.ndim else 0

    def replace(self, **changes: Any) -> Record:
        """Return a copy with ``changes`` applied; ``stats`` is recomputed."""

        return replace(self, **changes)

    def header_problems(self) -> list[str]:
        """Describe inconsistencies between header fields and ``samples``."""

        problems: list[str] = []
        rep = self.representation
        if rep.is_sampled:
            if self.samples.ndim != 1:
                problems.append(f"{rep.name} samples must be 1D, got shape {self.samples.shape}")
        elif rep.is_spectral:
            if self.samples.ndim != 2 or self.samples.shape[1] != 2:
                problems.append(f"{rep.name} samples must have shape (n_bins, 2), got {self.samples.shape}")
            elif self.samples.shape[0] < 2:
                problems.append(f"{rep.name} records need at least 2 frequency bins")
            if self.n_time is not None and self.n_time < 1:
                problems.append("n_time must be positive")
        if self.samples.size == 0:
            problems.append("samples cannot be empty")
        elif not np.all(np.isfinite(self.samples)):
            problems.append("samples contain non-finite values")
        return problems


__all__ = ["HeaderStats", "Record", "Representation", "WidthUnit"]
