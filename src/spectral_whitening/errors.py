"""Exception taxonomy for the whitening pipeline.

Batch preconditions raise subclasses of :class:`ValidationError`, each carrying
the 0-based indices of every offending record. Failures raised inside the
converter or smoother for one record surface as :class:`CollaboratorFailure`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class WhiteningError(Exception):
    """Base class for all errors raised by spectral_whitening."""


class ValidationError(WhiteningError, ValueError):
    """A batch-wide precondition failed; nothing was processed."""

    rule = "validation"

    def __init__(self, message: str, indices: Iterable[int] = ()) -> None:
        self.indices: tuple[int, ...] = tuple(int(index) for index in indices)
        if self.indices:
            listed = " ".join(str(index) for index in self.indices)
            message = f"Record(s): {listed}\n{message}"
        super().__init__(message)


class UnsupportedRepresentationError(ValidationError):
    rule = "representation"


class UnevenSamplingError(ValidationError):
    rule = "evenly_sampled"


class InvalidWidthError(ValidationError):
    rule = "width"


class InvalidUnitError(ValidationError):
    rule = "unit"


class InvalidRecordError(ValidationError):
    """Record header fields disagree with its samples."""

    rule = "header"


class BatchValidationError(ValidationError):
    """Several precondition rules failed at once."""

    rule = "batch"

    def __init__(self, errors: Sequence[ValidationError]) -> None:
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        message = "\n".join(f"[{error.rule}] {error}" for error in self.errors)
        super().__init__(message)
        self.indices = tuple(sorted({index for error in self.errors for index in error.indices}))


class CollaboratorFailure(WhiteningError, RuntimeError):
    """The converter or the smoother failed while processing one record."""

    def __init__(self, index: int, stage: str, message: str) -> None:
        self.index = int(index)
        self.stage = stage
        super().__init__(f"Record {self.index}: {stage} failed: {message}")


__all__ = [
    "BatchValidationError",
    "CollaboratorFailure",
    "InvalidRecordError",
    "InvalidUnitError",
    "InvalidWidthError",
    "UnevenSamplingError",
    "UnsupportedRepresentationError",
    "ValidationError",
    "WhiteningError",
]
