"""Call-scoped configuration for the whitening pipeline."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WIDTH = 0.001
DEFAULT_UNIT = "hz"


@dataclass(frozen=True)
class WhitenConfig:
    """Options threaded through one :func:`~spectral_whitening.analysis.whitening.whiten` call.

    Attributes
    ----------
    check_headers : bool
        Validate that every record's header agrees with its samples before
        processing.  Representation and sampling checks always run.
    max_workers : int or None
        Thread count for processing records in parallel.  ``None`` or ``1``
        processes serially.
    pad_to_power_of_two : bool
        Zero-pad sampled records to the next power of two before the forward
        transform.
    """

    check_headers: bool = True
    max_workers: int | None = None
    pad_to_power_of_two: bool = True

    def __post_init__(self) -> None:
        if self.max_workers is not None and int(self.max_workers) < 1:
            raise ValueError("max_workers must be >= 1 when provided.")

    @property
    def parallel(self) -> bool:
        return self.max_workers is not None and self.max_workers > 1


__all__ = ["DEFAULT_UNIT", "DEFAULT_WIDTH", "WhitenConfig"]
