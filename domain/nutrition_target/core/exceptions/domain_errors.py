"""Domain exceptions for nutrition target calculation."""

from typing import Any, Optional


class NutritionTargetError(Exception):
    """Base exception for nutrition target domain errors."""

    pass


class InvalidInputError(NutritionTargetError):
    """Raised when an input is physically impossible or not recognized.

    Covers non-positive weight/height/age, unknown enum values and a
    missing target weight for goals that need one. Fatal to the
    calculation: no partial target is ever produced.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value
