"""GoalAdjustmentService - goal and pace driven calorie target."""

import logging
from typing import List, Tuple

from ..core.ports.calculators import IGoalAdjustmentCalculator
from ..core.value_objects.calorie_target import CalorieTarget
from ..core.value_objects.goal_pace import GoalPace
from ..core.value_objects.goal_profile import GoalProfile
from ..core.value_objects.sex import Sex
from ..core.value_objects.target_warning import TargetWarning
from ..core.value_objects.tdee import TDEE
from ..core.value_objects.units import kg_to_lb
from ..core.value_objects.validation import coerce_enum
from ..core.value_objects.weight_goal import WeightGoal

logger = logging.getLogger(__name__)

# (upper bound in lb, exclusive; max deficit in kcal/day), ascending
SAFE_DEFICIT_TIERS: Tuple[Tuple[float, float], ...] = (
    (10.0, 350.0),
    (25.0, 500.0),
)
MAX_SAFE_DEFICIT = 750.0

# Recomposition always uses the gradual magnitude
RECOMP_DEFICIT = GoalPace.GRADUAL.daily_calorie_adjustment()


def max_safe_deficit(weight_difference_lbs: float) -> float:
    """Largest daily deficit allowed for the amount left to lose.

    Args:
        weight_difference_lbs: Amount to lose in pounds (sign ignored)

    Returns:
        float: 350 below 10 lb, 500 from 10 to 25 lb, 750 from 25 lb

    Example:
        >>> max_safe_deficit(22.0)
        500.0
    """
    amount = abs(weight_difference_lbs)
    for upper_bound, deficit in SAFE_DEFICIT_TIERS:
        if amount < upper_bound:
            return deficit
    return MAX_SAFE_DEFICIT


class GoalAdjustmentService(IGoalAdjustmentCalculator):
    """Apply a capped calorie deficit/surplus to TDEE per weight goal.

    Rules:
        - maintain: TDEE unchanged, pace ignored
        - lose: pace deficit, capped by ``max_safe_deficit``
        - gain: pace surplus, no cap
        - recomp: fixed 250 kcal deficit, pace ignored

    Whatever the goal, the result never drops below the sex-specific
    floor (1200 kcal female, 1500 kcal male/other). When the floor
    binds the target carries ``TargetWarning.BELOW_SAFE_MINIMUM``.
    """

    def calculate(
        self,
        tdee: TDEE,
        goal: GoalProfile,
        weight_difference_kg: float,
        sex: Sex,
    ) -> CalorieTarget:
        """Calculate the goal-adjusted daily calorie target.

        Args:
            tdee: Total daily energy expenditure
            goal: Weight goal, pace and target
            weight_difference_kg: Current minus target (positive = to lose)
            sex: Selects the calorie floor

        Returns:
            CalorieTarget: Rounded kcal/day with any safety warnings

        Example:
            >>> goal = GoalProfile(WeightGoal.LOSE, GoalPace.MODERATE, 60.0)
            >>> target = GoalAdjustmentService().calculate(
            ...     TDEE(2201.3875, ActivityLevel.MODERATE), goal, 10.0, Sex.FEMALE
            ... )
            >>> target.daily_calories
            1701
        """
        sex = coerce_enum(Sex, sex, "sex")
        warnings: List[TargetWarning] = []
        pace_adjustment = goal.goal_pace.daily_calorie_adjustment()

        if goal.weight_goal is WeightGoal.MAINTAIN:
            requested = adjustment = 0.0
        elif goal.weight_goal is WeightGoal.LOSE:
            requested = -pace_adjustment
            cap = max_safe_deficit(kg_to_lb(weight_difference_kg))
            safe_deficit = min(pace_adjustment, cap)
            adjustment = -safe_deficit
            if safe_deficit < pace_adjustment:
                warnings.append(TargetWarning.DEFICIT_CAPPED)
                logger.warning(
                    "goal_adjustment.deficit_capped",
                    extra={
                        "requested_deficit": pace_adjustment,
                        "max_safe_deficit": cap,
                    },
                )
        elif goal.weight_goal is WeightGoal.GAIN:
            # TODO: add a surplus cap once product defines the tiers
            requested = adjustment = pace_adjustment
        else:  # RECOMP
            requested = adjustment = -RECOMP_DEFICIT

        daily_calories = round(tdee.value + adjustment)

        floor = sex.calorie_floor()
        if daily_calories < floor:
            logger.warning(
                "goal_adjustment.below_safe_minimum",
                extra={
                    "unclamped_calories": daily_calories,
                    "floor": floor,
                    "sex": sex.value,
                },
            )
            daily_calories = floor
            warnings.append(TargetWarning.BELOW_SAFE_MINIMUM)

        return CalorieTarget(
            daily_calories=daily_calories,
            requested_adjustment=requested,
            adjustment=adjustment,
            warnings=tuple(warnings),
        )
