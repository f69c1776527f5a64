"""BMR value object - Basal Metabolic Rate."""

import math
from dataclasses import dataclass

from ..exceptions.domain_errors import InvalidInputError


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).

    Attributes:
        value: BMR in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate BMR is positive.

        Raises:
            InvalidInputError: If BMR is not positive
        """
        if not (math.isfinite(self.value) and self.value > 0):
            raise InvalidInputError(
                f"BMR must be positive and finite, got {self.value}",
                field="bmr",
                value=self.value,
            )

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
