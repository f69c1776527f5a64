"""Macro split strategies.

Two algorithms that cannot be reconciled exist for splitting calories:

- WEIGHT_ANCHORED (canonical): protein anchored to body weight, fat to a
  share of calories, carbohydrate absorbs the remainder.
- PERCENTAGE_SPLIT: fixed protein/fat shares of calories per goal,
  carbohydrate absorbs the remainder.

Both finish with ``fill_carbs`` so that the gram totals account for the
calorie target within 2 kcal.
"""

from enum import Enum
from types import MappingProxyType
from typing import Type

from ..core.ports.calculators import IMacroStrategy
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.units import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
)
from ..core.value_objects.weight_goal import WeightGoal


class MacroStrategyKind(str, Enum):
    """Tag for the available macro split algorithms."""

    WEIGHT_ANCHORED = "weight_anchored"
    PERCENTAGE_SPLIT = "percentage_split"


def fill_carbs(daily_calories: int, protein_g: int, fat_g: int) -> MacroSplit:
    """Give carbohydrate whatever energy protein and fat leave over.

    When protein and fat alone exceed the budget, carbs floor at zero,
    protein is capped at the whole budget and fat takes what protein
    leaves. The sub-gram leftover is folded into protein so the total
    stays within 2 kcal of ``daily_calories``.
    """
    remaining = daily_calories - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
    if remaining >= 0:
        return MacroSplit(
            protein_g=protein_g,
            carbs_g=round(remaining / KCAL_PER_G_CARBS),
            fat_g=fat_g,
        )

    protein_g = min(protein_g, daily_calories // KCAL_PER_G_PROTEIN)
    fat_budget = daily_calories - protein_g * KCAL_PER_G_PROTEIN
    fat_g = min(fat_g, round(fat_budget / KCAL_PER_G_FAT))
    leftover = fat_budget - fat_g * KCAL_PER_G_FAT
    protein_g = max(0, protein_g + round(leftover / KCAL_PER_G_PROTEIN))
    return MacroSplit(protein_g=protein_g, carbs_g=0, fat_g=fat_g)


class WeightAnchoredStrategy(IMacroStrategy):
    """Protein from g/kg bodyweight, fat from % of calories.

    | goal     | protein g/kg | fat % |
    |----------|--------------|-------|
    | lose     | 1.8          | 25    |
    | maintain | 1.4          | 30    |
    | gain     | 1.8          | 25    |
    | recomp   | 2.0          | 28    |
    """

    @property
    def name(self) -> str:
        return MacroStrategyKind.WEIGHT_ANCHORED.value

    def split(
        self,
        daily_calories: int,
        weight_kg: float,
        weight_goal: WeightGoal,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Example:
            >>> WeightAnchoredStrategy().split(1701, 70.0, WeightGoal.LOSE)
            MacroSplit(protein_g=126, carbs_g=194, fat_g=47)
        """
        # 1. Protein (goal-dependent g/kg)
        protein_g = round(weight_kg * weight_goal.protein_per_kg())

        # 2. Fat (goal-dependent percentage)
        fat_g = round(daily_calories * weight_goal.fat_percentage() / KCAL_PER_G_FAT)

        # 3. Carbs (remaining calories)
        return fill_carbs(daily_calories, protein_g, fat_g)


class PercentageSplitStrategy(IMacroStrategy):
    """Fixed P/C/F shares of calories, independent of body weight.

    | goal     | P  | C  | F  |
    |----------|----|----|----|
    | lose     | 35 | 30 | 35 |
    | maintain | 30 | 40 | 30 |
    | gain     | 35 | 45 | 20 |
    | recomp   | 40 | 35 | 25 |
    """

    @property
    def name(self) -> str:
        return MacroStrategyKind.PERCENTAGE_SPLIT.value

    def split(
        self,
        daily_calories: int,
        weight_kg: float,
        weight_goal: WeightGoal,
    ) -> MacroSplit:
        protein_share, _, fat_share = weight_goal.percentage_split()
        protein_g = round(daily_calories * protein_share / KCAL_PER_G_PROTEIN)
        fat_g = round(daily_calories * fat_share / KCAL_PER_G_FAT)
        return fill_carbs(daily_calories, protein_g, fat_g)


MACRO_STRATEGIES = MappingProxyType(
    {
        MacroStrategyKind.WEIGHT_ANCHORED: WeightAnchoredStrategy,
        MacroStrategyKind.PERCENTAGE_SPLIT: PercentageSplitStrategy,
    }
)


def strategy_class(kind: MacroStrategyKind) -> Type[IMacroStrategy]:
    """Look up the implementation for a strategy tag."""
    return MACRO_STRATEGIES[kind]
