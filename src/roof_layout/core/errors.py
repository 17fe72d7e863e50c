# File: src/roof_layout/core/errors.py

"""Exceptions raised by the layout solvers."""

from typing import Optional, Sequence


class RoofLayoutError(Exception):
    """Base class for every error raised by the roof layout solvers."""


class InputValidationError(RoofLayoutError, ValueError):
    """Raised before solving when the measurement batch is unusable.

    Attributes:
        field: Name of the request field that failed
        values: The offending measurements, if any
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        values: Optional[Sequence[float]] = None,
    ):
        self.field = field
        self.values = list(values) if values else []
        super().__init__(message)


class UnsolvableLayoutError(RoofLayoutError):
    """Raised when even the cut-course fallback cannot build a layout.

    This only happens when the configured bounds contradict each other,
    e.g. a minimum spacing above the maximum or a non-positive tile pitch.
    """
