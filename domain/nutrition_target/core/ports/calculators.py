"""Calculator ports - interfaces for the four pipeline stages."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biometric_profile import BiometricProfile
from ..value_objects.bmr import BMR
from ..value_objects.calorie_target import CalorieTarget
from ..value_objects.goal_profile import GoalProfile
from ..value_objects.macro_split import MacroSplit
from ..value_objects.sex import Sex
from ..value_objects.tdee import TDEE
from ..value_objects.weight_goal import WeightGoal


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, biometric: BiometricProfile) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            biometric: User biometric data

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IGoalAdjustmentCalculator(ABC):
    """Port for goal-driven calorie adjustment with safety capping."""

    @abstractmethod
    def calculate(
        self,
        tdee: TDEE,
        goal: GoalProfile,
        weight_difference_kg: float,
        sex: Sex,
    ) -> CalorieTarget:
        """Apply the goal's deficit/surplus to TDEE.

        Args:
            tdee: Total daily energy expenditure
            goal: Weight goal, pace and target
            weight_difference_kg: Current minus target weight
            sex: Selects the calorie floor

        Returns:
            CalorieTarget: Rounded daily calories plus safety warnings
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation.

    Calculates protein/carbs/fat split based on goal and calories.
    """

    @abstractmethod
    def calculate(
        self,
        daily_calories: int,
        weight_kg: float,
        weight_goal: WeightGoal,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            daily_calories: Daily calorie target
            weight_kg: Body weight in kg
            weight_goal: Weight goal

        Returns:
            MacroSplit: Protein/carbs/fat in grams
        """
        pass


class IMacroStrategy(ABC):
    """One interchangeable macro split algorithm."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier reported on the resulting target."""
        pass

    @abstractmethod
    def split(
        self,
        daily_calories: int,
        weight_kg: float,
        weight_goal: WeightGoal,
    ) -> MacroSplit:
        pass
