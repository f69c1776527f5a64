"""Time-to-goal estimation derived from the selected pace."""

import math
from datetime import date, timedelta

from ..core.value_objects.goal_profile import GoalProfile
from ..core.value_objects.weight_goal import WeightGoal


def weeks_to_goal(weight_difference_kg: float, goal: GoalProfile) -> int:
    """Whole weeks needed to cover the weight difference at the goal pace.

    Returns 0 for maintain goals.

    Example:
        >>> weeks_to_goal(5.0, GoalProfile(WeightGoal.LOSE, GoalPace.MODERATE, 75.0))
        12
    """
    if goal.weight_goal is WeightGoal.MAINTAIN:
        return 0
    return math.ceil(abs(weight_difference_kg) / goal.goal_pace.weekly_rate_kg())


def estimated_goal_date(today: date, weeks: int) -> date:
    return today + timedelta(weeks=weeks)
