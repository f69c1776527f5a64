"""Value objects for nutrition target domain."""

from .activity_level import ActivityLevel
from .biometric_profile import BiometricProfile
from .bmr import BMR
from .calorie_target import CalorieTarget
from .goal_pace import GoalPace
from .goal_profile import GoalProfile
from .macro_split import MacroSplit
from .nutrition_target import NutritionTarget
from .sex import Sex
from .target_warning import TargetWarning
from .tdee import TDEE
from .weight_goal import WeightGoal

__all__ = [
    "Sex",
    "ActivityLevel",
    "WeightGoal",
    "GoalPace",
    "BiometricProfile",
    "GoalProfile",
    "BMR",
    "TDEE",
    "CalorieTarget",
    "MacroSplit",
    "NutritionTarget",
    "TargetWarning",
]
