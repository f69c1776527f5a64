"""WeightGoal value object - user's weight objective."""

from enum import Enum
from types import MappingProxyType
from typing import Tuple


class WeightGoal(str, Enum):
    """User's weight goal determining calorie adjustment and macro split.

    - LOSE: pace-driven deficit, capped by the amount left to lose
    - MAINTAIN: eat at TDEE, pace ignored
    - GAIN: pace-driven surplus
    - RECOMP: fixed small deficit regardless of pace
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"
    RECOMP = "recomp"

    def requires_target_weight(self) -> bool:
        """Every goal except maintain needs a target weight."""
        return self is not WeightGoal.MAINTAIN

    def protein_per_kg(self) -> float:
        """Get protein requirement (g/kg body weight).

        Example:
            >>> WeightGoal.RECOMP.protein_per_kg()
            2.0
        """
        return PROTEIN_PER_KG[self]

    def fat_percentage(self) -> float:
        """Get fat calories as a fraction of the total (0.0-1.0).

        Example:
            >>> WeightGoal.MAINTAIN.fat_percentage()
            0.3
        """
        return FAT_PERCENTAGE[self]

    def percentage_split(self) -> Tuple[float, float, float]:
        """Get the fixed protein/carbs/fat calorie fractions.

        Used by the percentage split strategy only.
        """
        return PERCENTAGE_SPLIT[self]


PROTEIN_PER_KG = MappingProxyType(
    {
        WeightGoal.LOSE: 1.8,
        WeightGoal.MAINTAIN: 1.4,
        WeightGoal.GAIN: 1.8,
        WeightGoal.RECOMP: 2.0,
    }
)

FAT_PERCENTAGE = MappingProxyType(
    {
        WeightGoal.LOSE: 0.25,
        WeightGoal.MAINTAIN: 0.30,
        WeightGoal.GAIN: 0.25,
        WeightGoal.RECOMP: 0.28,
    }
)

# (protein, carbs, fat) fractions of total calories
PERCENTAGE_SPLIT = MappingProxyType(
    {
        WeightGoal.LOSE: (0.35, 0.30, 0.35),
        WeightGoal.MAINTAIN: (0.30, 0.40, 0.30),
        WeightGoal.GAIN: (0.35, 0.45, 0.20),
        WeightGoal.RECOMP: (0.40, 0.35, 0.25),
    }
)
