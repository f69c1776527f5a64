"""Input guards shared by the value objects and calculators."""

import math
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..exceptions.domain_errors import InvalidInputError

E = TypeVar("E", bound=Enum)

# Upper bounds past which a body measurement is physically impossible
MAX_AGE_YEARS = 150
MAX_WEIGHT_KG = 1000.0
MAX_HEIGHT_CM = 300.0


def coerce_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Accepts a member or its raw value (case-insensitive for strings).

    Raises:
        InvalidInputError: If the value is not a recognized member
    """
    if isinstance(value, enum_cls):
        return value
    raw = value.lower() if isinstance(value, str) else value
    try:
        return enum_cls(raw)
    except ValueError as e:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidInputError(
            f"Unrecognized {field} {value!r} (expected one of: {allowed})",
            field=field,
            value=value,
        ) from e


def require_positive(
    value: Any, field: str, maximum: Optional[float] = None
) -> float:
    """Reject non-numeric, non-finite and non-positive values.

    Args:
        value: Number to check
        field: Input name reported on failure
        maximum: Optional inclusive upper bound

    Raises:
        InvalidInputError: If value is not a positive finite number
            within ``maximum``
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(
            f"{field} must be a number, got {value!r}", field=field, value=value
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInputError(
            f"{field} must be finite, got {value}", field=field, value=value
        )
    if not value > 0:
        raise InvalidInputError(
            f"{field} must be positive, got {value}", field=field, value=value
        )
    if maximum is not None and value > maximum:
        raise InvalidInputError(
            f"{field} must be at most {maximum}, got {value}",
            field=field,
            value=value,
        )
    return value
