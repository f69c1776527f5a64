"""GoalPace value object - how fast the user wants to reach the goal."""

from enum import Enum
from types import MappingProxyType

from .units import DAYS_PER_WEEK, KCAL_PER_LB_FAT, lb_to_kg


class GoalPace(str, Enum):
    """Requested rate of weight change.

    Only the weekly rate in pounds is stored; the daily calorie
    adjustment and the metric rate are derived from it so the displayed
    "lb/week" copy and the computed adjustment can never drift apart.

    - GRADUAL: 0.5 lb/week (250 kcal/day)
    - MODERATE: 1.0 lb/week (500 kcal/day)
    - AGGRESSIVE: 1.5 lb/week (750 kcal/day)
    """

    GRADUAL = "gradual"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"

    def weekly_rate_lb(self) -> float:
        """Get weekly weight change in pounds."""
        return WEEKLY_RATE_LB[self]

    def weekly_rate_kg(self) -> float:
        """Get weekly weight change in kilograms.

        Example:
            >>> round(GoalPace.MODERATE.weekly_rate_kg(), 3)
            0.454
        """
        return lb_to_kg(self.weekly_rate_lb())

    def daily_calorie_adjustment(self) -> float:
        """Get the daily deficit/surplus magnitude in kcal.

        Computed as ``lb/week * 3500 / 7``.

        Example:
            >>> GoalPace.AGGRESSIVE.daily_calorie_adjustment()
            750.0
        """
        return self.weekly_rate_lb() * KCAL_PER_LB_FAT / DAYS_PER_WEEK

    def description(self) -> str:
        """Get human-readable description."""
        return _DESCRIPTIONS[self]


WEEKLY_RATE_LB = MappingProxyType(
    {
        GoalPace.GRADUAL: 0.5,
        GoalPace.MODERATE: 1.0,
        GoalPace.AGGRESSIVE: 1.5,
    }
)

_DESCRIPTIONS = MappingProxyType(
    {
        GoalPace.GRADUAL: "Slow & sustainable",
        GoalPace.MODERATE: "Balanced approach",
        GoalPace.AGGRESSIVE: "Fast results",
    }
)
