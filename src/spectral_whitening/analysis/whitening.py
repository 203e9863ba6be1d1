"""Spectral whitening of signal records.

Each record's complex spectrum is divided by a sliding-mean smoothed copy of
its own amplitude spectrum.  This flattens the spectral envelope while keeping
the phase, which is the usual normalization step ahead of ambient-noise
cross-correlation (Bensen et al., 2007, GJI 169, 1239-1260).

Records may be sampled series (``TIME``/``GENERIC_XY``) or spectra
(``RECT_SPECTRUM``/``POLAR_SPECTRUM``); every output keeps its input's
representation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from functools import partial
from typing import Any

import numpy as np

from spectral_whitening.analysis.representation import (
    forward_transform,
    inverse_transform,
    to_polar,
    to_rectangular,
)
from spectral_whitening.analysis.smoothing import SmootherOptions, sliding_mean
from spectral_whitening.analysis.windows import resolve_half_width
from spectral_whitening.config import DEFAULT_UNIT, DEFAULT_WIDTH, WhitenConfig
from spectral_whitening.dataio.records import Record, Representation, WidthUnit
from spectral_whitening.errors import (
    BatchValidationError,
    CollaboratorFailure,
    InvalidRecordError,
    InvalidUnitError,
    InvalidWidthError,
    UnevenSamplingError,
    UnsupportedRepresentationError,
    ValidationError,
    WhiteningError,
)
from spectral_whitening.utils.validation import broadcast_per_record, is_integral, is_positive_real

logger = logging.getLogger(__name__)

# Added to the smoothed amplitude before dividing.
EPSILON = float(np.finfo(float).eps)

Smoother = Callable[..., np.ndarray]


def whiten(
        records: Sequence[Record] | Record,
        width: float | Sequence[float] | None = DEFAULT_WIDTH,
        unit: WidthUnit | str | Sequence[WidthUnit | str] | None = DEFAULT_UNIT,
        *,
        config: WhitenConfig | None = None,
        smoother: Smoother | None = None,
        **smoother_options: Any,
) -> list[Record]:
    """Spectrally whiten a batch of records.

    Parameters
    ----------
    records : sequence of Record
        Non-empty batch.  A single :class:`Record` is treated as a batch of one.
    width : float or sequence of float
        Smoothing window width, given once or once per record.  Default 0.001.
    unit : ``"hz"`` or ``"samples"`` (any case), or a sequence of them
        Units of ``width``.  Widths in samples must be positive integers.
    config : WhitenConfig, optional
        Header checking, parallelism and transform padding for this call.
    smoother : callable, optional
        Replacement for :func:`~spectral_whitening.analysis.smoothing.sliding_mean`
        with signature ``smoother(values, half_width, **smoother_options)``.
    **smoother_options
        Forwarded unchanged to the smoother (``edge``, ``pad_value`` for the
        built-in one).

    Returns
    -------
    list of Record
        New records in input order, each with its input's representation and
        recomputed header statistics.

    Raises
    ------
    ValidationError
        If any batch precondition fails.  Every failing record index is
        reported and nothing is processed.
    CollaboratorFailure
        If the transform or the smoother fails for any record.
    """

    batch = [records] if isinstance(records, Record) else list(records)
    settings = config if config is not None else WhitenConfig()
    widths, units = validate_batch(
        batch,
        DEFAULT_WIDTH if width is None else width,
        DEFAULT_UNIT if unit is None else unit,
        check_headers=settings.check_headers,
    )

    if smoother is None:
        options = SmootherOptions.from_mapping(smoother_options)
        smoother = sliding_mean
        smoother_options = {"edge": options.edge, "pad_value": options.pad_value}

    logger.info("Beginning spectral whitening of %d record(s)", len(batch))
    job = partial(
        _whiten_job,
        smoother=smoother,
        smoother_options=smoother_options,
        pad_to_power_of_two=settings.pad_to_power_of_two,
    )
    indices = range(len(batch))
    if settings.parallel:
        with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
            whitened = list(pool.map(job, indices, batch, widths, units))
    else:
        whitened = [job(*args) for args in zip(indices, batch, widths, units)]
    logger.info("Finished spectral whitening of %d record(s)", len(whitened))
    return whitened


def whiten_record(
        record: Record,
        width: float = DEFAULT_WIDTH,
        unit: WidthUnit | str = DEFAULT_UNIT,
        *,
        smoother: Smoother | None = None,
        pad_to_power_of_two: bool = True,
        index: int = 0,
        **smoother_options: Any,
) -> Record:
    """Whiten one record; ``index`` only labels errors and log messages."""

    if smoother is None:
        smoother = sliding_mean
    rep = record.representation

    if rep is Representation.TIME or rep is Representation.GENERIC_XY:
        with _collaborator_stage(index, "forward transform"):
            rectangular = forward_transform(record, pad_to_power_of_two=pad_to_power_of_two)
            polar = to_polar(rectangular)
    elif rep is Representation.RECT_SPECTRUM:
        rectangular = record
        with _collaborator_stage(index, "polar conversion"):
            polar = to_polar(record)
    elif rep is Representation.POLAR_SPECTRUM:
        polar = record
        with _collaborator_stage(index, "rectangular conversion"):
            rectangular = to_rectangular(record)
    else:
        raise UnsupportedRepresentationError(f"Invalid operation on {rep.name} record(s)!", [index])

    half_width = resolve_half_width(width, unit, rectangular.sample_spacing)
    logger.debug(
        "Record %d%s: %s, %d bins, half-width %d",
        index,
        f" ({record.name})" if record.name else "",
        rep.name,
        rectangular.n_samples,
        half_width,
    )

    amplitude = np.asarray(polar.samples[:, 0], dtype=float)
    with _collaborator_stage(index, "smoother"):
        smoothed = np.asarray(smoother(amplitude, half_width, **smoother_options), dtype=float)
    if smoothed.shape != amplitude.shape:
        raise CollaboratorFailure(
            index,
            "smoother",
            f"returned shape {smoothed.shape}, expected {amplitude.shape}",
        )

    # Real and imaginary parts share one divisor per bin, so phase is kept.
    divisor = smoothed + EPSILON
    whitened = rectangular.replace(samples=rectangular.samples / divisor[:, np.newaxis])

    if rep is Representation.RECT_SPECTRUM:
        return whitened
    if rep is Representation.POLAR_SPECTRUM:
        with _collaborator_stage(index, "polar conversion"):
            return to_polar(whitened)
    with _collaborator_stage(index, "inverse transform"):
        restored = inverse_transform(whitened)
    return restored.replace(representation=rep, sample_spacing=record.sample_spacing)


def validate_batch(
        records: Sequence[Record],
        width: Any,
        unit: Any,
        *,
        check_headers: bool = True,
) -> tuple[list[float], list[WidthUnit]]:
    """Check every batch precondition and return per-record widths and units.

    All rules are evaluated before raising.  A single failing rule raises
    its own :class:`ValidationError` subclass; several raise
    :class:`BatchValidationError` wrapping each of them.
    """

    n_records = len(records)
    if n_records == 0:
        raise ValidationError("records cannot be empty.")
    not_records = [index for index, record in enumerate(records) if not isinstance(record, Record)]
    if not_records:
        raise ValidationError("Entries must be Record instances.", not_records)

    errors: list[ValidationError] = []

    xyz = [index for index, record in enumerate(records) if record.representation is Representation.XYZ]
    if xyz:
        errors.append(UnsupportedRepresentationError("Invalid operation on XYZ record(s)!", xyz))

    uneven = [index for index, record in enumerate(records) if not record.evenly_sampled]
    if uneven:
        errors.append(UnevenSamplingError("Invalid operation on unevenly sampled record(s)!", uneven))

    if check_headers:
        problems = {
            index: record.header_problems()
            for index, record in enumerate(records)
            if record.representation is not Representation.XYZ
        }
        bad_headers = [index for index, found in problems.items() if found]
        if bad_headers:
            details = "; ".join(f"{index}: {', '.join(problems[index])}" for index in bad_headers)
            errors.append(InvalidRecordError(f"Record header(s) inconsistent with samples: {details}", bad_headers))

    units: list[WidthUnit] = []
    unit_entries = broadcast_per_record(unit, n_records)
    if unit_entries is None:
        errors.append(
            InvalidUnitError(f"UNIT must be 'Hz' or 'samples', given once or once per record ({n_records})!")
        )
    else:
        bad_units: list[int] = []
        for index, entry in enumerate(unit_entries):
            try:
                units.append(WidthUnit.parse(entry))
            except ValueError:
                bad_units.append(index)
        if bad_units:
            errors.append(InvalidUnitError("UNIT must be 'Hz' or 'samples'!", bad_units))
            units = []

    widths: list[float] = []
    width_entries = broadcast_per_record(width, n_records)
    if width_entries is None:
        errors.append(
            InvalidWidthError(f"WIDTH must be given once or once per record ({n_records})!")
        )
    else:
        bad_widths = [index for index, entry in enumerate(width_entries) if not is_positive_real(entry)]
        if bad_widths:
            errors.append(InvalidWidthError("WIDTH must be a positive real!", bad_widths))
        elif units:
            fractional = [
                index
                for index, (entry, entry_unit) in enumerate(zip(width_entries, units))
                if entry_unit is WidthUnit.SAMPLES and not is_integral(entry)
            ]
            if fractional:
                errors.append(InvalidWidthError("WIDTH in samples must be a positive integer!", fractional))
        if not errors:
            widths = [float(entry) for entry in width_entries]

    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise BatchValidationError(errors)
    return widths, units


def _whiten_job(
        index: int,
        record: Record,
        width: float,
        unit: WidthUnit,
        *,
        smoother: Smoother,
        smoother_options: dict[str, Any],
        pad_to_power_of_two: bool,
) -> Record:
    return whiten_record(
        record,
        width,
        unit,
        smoother=smoother,
        pad_to_power_of_two=pad_to_power_of_two,
        index=index,
        **smoother_options,
    )


@contextmanager
def _collaborator_stage(index: int, stage: str) -> Iterator[None]:
    """Re-raise failures from a converter or smoother call as CollaboratorFailure."""
    try:
        yield
    except WhiteningError:
        raise
    except Exception as exc:
        raise CollaboratorFailure(index, stage, str(exc)) from exc


__all__ = ["EPSILON", "validate_batch", "whiten", "whiten_record"]
