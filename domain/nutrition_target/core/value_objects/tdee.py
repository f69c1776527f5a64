"""TDEE value object - Total Daily Energy Expenditure."""

import math
from dataclasses import dataclass

from ..exceptions.domain_errors import InvalidInputError
from .activity_level import ActivityLevel


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR x PAL (Physical Activity Level)

    Attributes:
        value: TDEE in kcal/day (must be positive)
        activity_level: Activity level the multiplier came from
    """

    value: float
    activity_level: ActivityLevel

    def __post_init__(self) -> None:
        if not (math.isfinite(self.value) and self.value > 0):
            raise InvalidInputError(
                f"TDEE must be positive and finite, got {self.value}",
                field="tdee",
                value=self.value,
            )

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
