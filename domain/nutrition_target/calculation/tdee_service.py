"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE
from ..core.value_objects.validation import coerce_enum


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = BMR x PAL

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Active: 1.725 (hard exercise 6-7 days/week)
        - Extreme: 1.9 (very hard exercise + physical job)
    """

    def compute(
        self, bmr: float, activity_level: Union[ActivityLevel, str]
    ) -> float:
        """Scale a raw BMR value by the activity multiplier.

        Raises:
            InvalidInputError: If activity level is not recognized
        """
        activity_level = coerce_enum(ActivityLevel, activity_level, "activity_level")
        return bmr * activity_level.pal_multiplier()

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure in kcal/day

        Example:
            >>> service = TDEEService()
            >>> tdee = service.calculate(BMR(value=1780.0), ActivityLevel.MODERATE)
            >>> tdee.value
            2759.0
        """
        activity_level = coerce_enum(ActivityLevel, activity_level, "activity_level")
        return TDEE(
            value=self.compute(bmr.value, activity_level),
            activity_level=activity_level,
        )
