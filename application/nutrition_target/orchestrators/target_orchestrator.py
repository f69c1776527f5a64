"""TargetOrchestrator - runs the four calculation stages in sequence."""

import logging
from datetime import date
from typing import Callable, Optional

from domain.nutrition_target.calculation.bmr_service import BMRService
from domain.nutrition_target.calculation.goal_adjustment_service import (
    GoalAdjustmentService,
)
from domain.nutrition_target.calculation.macro_service import MacroService
from domain.nutrition_target.calculation.tdee_service import TDEEService
from domain.nutrition_target.calculation.timeline import (
    estimated_goal_date,
    weeks_to_goal,
)
from domain.nutrition_target.core.exceptions.domain_errors import (
    InvalidInputError,
)
from domain.nutrition_target.core.ports.calculators import (
    IBMRCalculator,
    IGoalAdjustmentCalculator,
    IMacroCalculator,
    ITDEECalculator,
)
from domain.nutrition_target.core.value_objects.biometric_profile import (
    BiometricProfile,
)
from domain.nutrition_target.core.value_objects.goal_profile import GoalProfile
from domain.nutrition_target.core.value_objects.nutrition_target import (
    NutritionTarget,
)

logger = logging.getLogger(__name__)


class TargetOrchestrator:
    """
    Orchestrates calculation services into one nutrition target.

    Flow:
    1. Calculate BMR from the biometric profile
    2. Calculate TDEE from BMR and activity level
    3. Apply goal adjustment (capped deficit, calorie floor)
    4. Calculate macro distribution from the final calories
    5. Derive weeks to goal and estimated goal date

    Stateless: holds only the stage services, so a single instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        goal_adjustment_service: Optional[IGoalAdjustmentCalculator] = None,
        macro_service: Optional[IMacroCalculator] = None,
        clock: Callable[[], date] = date.today,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._goal_adjustment_service = (
            goal_adjustment_service or GoalAdjustmentService()
        )
        self._macro_service = macro_service or MacroService()
        self._clock = clock

    @property
    def macro_strategy_name(self) -> str:
        strategy = getattr(self._macro_service, "strategy", None)
        return strategy.name if strategy is not None else "custom"

    def calculate(
        self,
        biometric: BiometricProfile,
        goal: GoalProfile,
        today: Optional[date] = None,
    ) -> NutritionTarget:
        """
        Calculate the complete nutrition target.

        Args:
            biometric: Sex, age, weight, height and activity level
            goal: Weight goal, pace and target weight
            today: Reference date for the goal date (defaults to clock)

        Returns:
            NutritionTarget with calories, macros and time to goal

        Raises:
            InvalidInputError: If inputs are not valid profiles; raised
                before any stage runs
        """
        if not isinstance(biometric, BiometricProfile):
            raise InvalidInputError(
                f"Expected BiometricProfile, got {type(biometric).__name__}",
                field="biometric",
            )
        if not isinstance(goal, GoalProfile):
            raise InvalidInputError(
                f"Expected GoalProfile, got {type(goal).__name__}",
                field="goal",
            )

        weight_difference_kg = goal.weight_difference_kg(biometric.weight_kg)

        # Step 1: BMR (basal metabolic rate)
        bmr = self._bmr_service.calculate(biometric)

        # Step 2: TDEE (total daily energy expenditure)
        tdee = self._tdee_service.calculate(
            bmr=bmr,
            activity_level=biometric.activity_level,
        )

        # Step 3: goal adjustment with safety capping
        calorie_target = self._goal_adjustment_service.calculate(
            tdee=tdee,
            goal=goal,
            weight_difference_kg=weight_difference_kg,
            sex=biometric.sex,
        )

        # Step 4: macro distribution
        macro_split = self._macro_service.calculate(
            daily_calories=calorie_target.daily_calories,
            weight_kg=biometric.weight_kg,
            weight_goal=goal.weight_goal,
        )

        weeks = weeks_to_goal(weight_difference_kg, goal)
        reference_date = today or self._clock()

        target = NutritionTarget(
            daily_calories=calorie_target.daily_calories,
            protein_grams=macro_split.protein_g,
            carbs_grams=macro_split.carbs_g,
            fat_grams=macro_split.fat_g,
            weeks_to_goal=weeks,
            estimated_goal_date=estimated_goal_date(reference_date, weeks),
            bmr=bmr.value,
            tdee=tdee.value,
            adjustment=calorie_target.adjustment,
            weight_difference_kg=weight_difference_kg,
            macro_strategy=self.macro_strategy_name,
            warnings=calorie_target.warnings,
        )

        logger.info(
            "nutrition_target.calculated",
            extra={
                "weight_goal": goal.weight_goal.value,
                "goal_pace": goal.goal_pace.value,
                "daily_calories": target.daily_calories,
                "macros": str(macro_split),
                "weeks_to_goal": weeks,
                "warnings": [w.value for w in target.warnings],
            },
        )
        return target
