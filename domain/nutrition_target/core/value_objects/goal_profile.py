"""GoalProfile value object - weight goal, target and pace."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions.domain_errors import InvalidInputError
from .goal_pace import GoalPace
from .weight_goal import WeightGoal
from .validation import MAX_WEIGHT_KG, coerce_enum, require_positive


@dataclass(frozen=True)
class GoalProfile:
    """User's stated goal.

    Attributes:
        weight_goal: lose / maintain / gain / recomp
        goal_pace: gradual / moderate / aggressive
        target_weight_kg: Target weight, required unless maintaining
    """

    weight_goal: WeightGoal
    goal_pace: GoalPace = GoalPace.MODERATE
    target_weight_kg: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "weight_goal",
            coerce_enum(WeightGoal, self.weight_goal, "weight_goal"),
        )
        object.__setattr__(
            self, "goal_pace", coerce_enum(GoalPace, self.goal_pace, "goal_pace")
        )
        if self.target_weight_kg is None:
            if self.weight_goal.requires_target_weight():
                raise InvalidInputError(
                    f"target_weight_kg is required for goal "
                    f"'{self.weight_goal.value}'",
                    field="target_weight_kg",
                )
        else:
            require_positive(
                self.target_weight_kg, "target_weight_kg", MAX_WEIGHT_KG
            )

    def weight_difference_kg(self, current_weight_kg: float) -> float:
        """Current minus target weight (positive means weight to lose).

        Maintain goals have no difference by definition.
        """
        if (
            self.weight_goal is WeightGoal.MAINTAIN
            or self.target_weight_kg is None
        ):
            return 0.0
        return current_weight_kg - self.target_weight_kg
