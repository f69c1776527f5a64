"""BiometricProfile value object - body measurements and activity."""

from dataclasses import dataclass

from ..exceptions.domain_errors import InvalidInputError
from .activity_level import ActivityLevel
from .sex import Sex
from .validation import (
    MAX_AGE_YEARS,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    coerce_enum,
    require_positive,
)


@dataclass(frozen=True)
class BiometricProfile:
    """User biometric and activity data for target calculation.

    Immutable per calculation. Range limits (age 13-120, weight
    20-300 kg, height 90-250 cm) are enforced by the onboarding
    collaborator; only physically impossible values (non-positive,
    non-finite or beyond the MAX_* bounds in ``validation``) are
    rejected here.

    Attributes:
        sex: Recorded sex (male/female/other)
        age_years: Age in whole years
        weight_kg: Current body weight in kilograms
        height_cm: Height in centimeters
        activity_level: Physical activity level
    """

    sex: Sex
    age_years: int
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevel

    def __post_init__(self) -> None:
        """Coerce enum fields and reject impossible values.

        Raises:
            InvalidInputError: If any constraint is violated
        """
        object.__setattr__(self, "sex", coerce_enum(Sex, self.sex, "sex"))
        object.__setattr__(
            self,
            "activity_level",
            coerce_enum(ActivityLevel, self.activity_level, "activity_level"),
        )
        if isinstance(self.age_years, bool) or not isinstance(self.age_years, int):
            raise InvalidInputError(
                f"age_years must be an integer, got {self.age_years!r}",
                field="age_years",
                value=self.age_years,
            )
        require_positive(self.age_years, "age_years", MAX_AGE_YEARS)
        require_positive(self.weight_kg, "weight_kg", MAX_WEIGHT_KG)
        require_positive(self.height_cm, "height_cm", MAX_HEIGHT_CM)
