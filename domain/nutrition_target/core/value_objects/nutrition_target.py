"""NutritionTarget value object - the engine's complete output."""

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .macro_split import MacroSplit
from .target_warning import TargetWarning
from .units import kg_to_lb


@dataclass(frozen=True)
class NutritionTarget:
    """Daily calorie and macronutrient targets for one user.

    Produced fresh on every calculation and never mutated; callers
    replace it wholesale when inputs change.

    Attributes:
        daily_calories: Target intake in kcal/day
        protein_grams: Protein target in grams
        carbs_grams: Carbohydrate target in grams
        fat_grams: Fat target in grams
        weeks_to_goal: Estimated weeks to reach target weight (0 = maintain)
        estimated_goal_date: Calculation date + weeks_to_goal weeks
        bmr: Basal metabolic rate (kcal/day, unrounded)
        tdee: Total daily energy expenditure (kcal/day, unrounded)
        adjustment: Signed goal adjustment applied to TDEE before the floor
        weight_difference_kg: Current minus target weight
        macro_strategy: Name of the macro strategy that produced the split
        warnings: Non-fatal safety flags
    """

    daily_calories: int
    protein_grams: int
    carbs_grams: int
    fat_grams: int
    weeks_to_goal: int
    estimated_goal_date: date
    bmr: float
    tdee: float
    adjustment: float
    weight_difference_kg: float
    macro_strategy: str
    warnings: Tuple[TargetWarning, ...] = ()

    def __post_init__(self) -> None:
        if self.daily_calories <= 0:
            raise ValueError(
                f"daily_calories must be positive, got {self.daily_calories}"
            )
        if self.weeks_to_goal < 0:
            raise ValueError(
                f"weeks_to_goal must be non-negative, got {self.weeks_to_goal}"
            )

    @property
    def below_safe_minimum(self) -> bool:
        """True when the calorie floor was applied."""
        return TargetWarning.BELOW_SAFE_MINIMUM in self.warnings

    @property
    def weight_difference_lbs(self) -> float:
        return kg_to_lb(self.weight_difference_kg)

    @property
    def macro_split(self) -> MacroSplit:
        return MacroSplit(
            protein_g=self.protein_grams,
            carbs_g=self.carbs_grams,
            fat_g=self.fat_grams,
        )

    def macro_energy(self) -> int:
        """Energy accounted for by the macro grams (4/4/9 kcal per gram)."""
        return self.macro_split.total_calories()
