# File: src/roof_layout/core/validation.py

"""Request field coercion and measurement checks shared by both solvers."""

from typing import Any, Sequence, Tuple

from .errors import InputValidationError

_TRUE_STRINGS = {"YES", "Y", "TRUE", "1"}
_FALSE_STRINGS = {"NO", "N", "FALSE", "0", ""}


def coerce_flag(value: Any, name: str = "flag") -> bool:
    """Convert a YES/NO form value or a bool to a bool.

    Args:
        value: bool, or a string such as "YES" / "NO"
        name: Field name used in the error message

    Returns:
        The flag as a bool

    Raises:
        ValueError: If a string is neither a yes nor a no value
    """
    if isinstance(value, str):
        normalized = value.strip().upper()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
        raise ValueError(f"{name} must be YES or NO, got {value!r}")
    return bool(value)


def flag_to_form(value: bool) -> str:
    """Convert a bool back to the YES/NO form value."""
    return "YES" if value else "NO"


def validate_measurements(
    values: Sequence[float],
    minimum: float,
    field: str,
    description: str,
) -> Tuple[float, ...]:
    """Check a measurement batch before any solving starts.

    Args:
        values: Widths or rafter heights in millimetres
        minimum: Smallest acceptable measurement
        field: Request field name, reported on the error
        description: Human name for the measurement in the message

    Returns:
        The measurements as a tuple

    Raises:
        InputValidationError: If the batch is empty or any value is below minimum
    """
    measurements = tuple(values)
    if not measurements:
        raise InputValidationError(
            f"At least one {description} value is required to calculate a layout.",
            field=field,
        )

    too_small = [v for v in measurements if v < minimum]
    if too_small:
        raise InputValidationError(
            f"{description.capitalize()} values must be at least {minimum}mm "
            f"to calculate a valid layout (got {', '.join(str(v) for v in too_small)}).",
            field=field,
            values=too_small,
        )
    return measurements
