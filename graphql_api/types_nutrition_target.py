"""GraphQL types for nutrition target domain.

These types expose the personalized calorie target, macronutrient split
and time-to-goal estimate computed from biometric and goal inputs.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

import strawberry

__all__ = [
    # Enums
    "SexEnum",
    "ActivityLevelEnum",
    "WeightGoalEnum",
    "GoalPaceEnum",
    "TargetWarningEnum",
    # Output types
    "MacroSplitType",
    "NutritionTargetType",
    # Input types
    "BiometricProfileInput",
    "GoalProfileInput",
    "NutritionTargetInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class SexEnum(str, Enum):
    """Recorded sex for BMR offset and calorie floor."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation."""

    SEDENTARY = "sedentary"  # Little or no exercise
    LIGHT = "light"  # Light exercise 1-3 days/week
    MODERATE = "moderate"  # Moderate exercise 3-5 days/week
    ACTIVE = "active"  # Hard exercise 6-7 days/week
    EXTREME = "extreme"  # Very hard exercise + physical job


@strawberry.enum
class WeightGoalEnum(str, Enum):
    """User's weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"
    RECOMP = "recomp"  # Body recomposition, fixed small deficit


@strawberry.enum
class GoalPaceEnum(str, Enum):
    """Requested pace of weight change."""

    GRADUAL = "gradual"  # 0.5 lb/week
    MODERATE = "moderate"  # 1.0 lb/week
    AGGRESSIVE = "aggressive"  # 1.5 lb/week


@strawberry.enum
class TargetWarningEnum(str, Enum):
    """Safety interventions applied to a still-valid target."""

    BELOW_SAFE_MINIMUM = "below_safe_minimum"
    DEFICIT_CAPPED = "deficit_capped"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class MacroSplitType:
    """Macronutrient distribution (protein, carbs, fat) in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int

    @strawberry.field
    def total_calories(self) -> int:
        """Total calories from macros (4-4-9 rule)."""
        return (self.protein_g * 4) + (self.carbs_g * 4) + (self.fat_g * 9)

    @strawberry.field
    def summary(self) -> str:
        """Human-readable macro summary."""
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"


@strawberry.type
class NutritionTargetType:
    """Daily calorie and macro targets with time-to-goal estimate."""

    daily_calories: int  # kcal/day
    protein_grams: int
    carbs_grams: int
    fat_grams: int
    weeks_to_goal: int
    estimated_goal_date: date
    bmr: float  # kcal/day
    tdee: float  # kcal/day
    adjustment: float  # kcal/day applied to TDEE (negative = deficit)
    weight_difference_kg: float
    weight_difference_lbs: float
    macro_strategy: str
    warnings: List[TargetWarningEnum]
    below_safe_minimum: bool

    @strawberry.field
    def macro_split(self) -> MacroSplitType:
        return MacroSplitType(
            protein_g=self.protein_grams,
            carbs_g=self.carbs_grams,
            fat_g=self.fat_grams,
        )


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class BiometricProfileInput:
    """Finished biometric inputs from onboarding or profile edit."""

    sex: SexEnum
    age_years: int
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevelEnum


@strawberry.input
class GoalProfileInput:
    """Weight goal, pace and target weight."""

    weight_goal: WeightGoalEnum
    goal_pace: GoalPaceEnum = GoalPaceEnum.MODERATE
    target_weight_kg: Optional[float] = None


@strawberry.input
class NutritionTargetInput:
    """Input for the nutritionTarget query."""

    biometric: BiometricProfileInput
    goal: GoalProfileInput
    today: Optional[date] = None  # defaults to server date
