"""CalculateTargetQuery - compute a nutrition target on demand."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.nutrition_target.core.value_objects.biometric_profile import (
    BiometricProfile,
)
from domain.nutrition_target.core.value_objects.goal_profile import GoalProfile
from domain.nutrition_target.core.value_objects.nutrition_target import (
    NutritionTarget,
)

from ..orchestrators.target_orchestrator import TargetOrchestrator


@dataclass(frozen=True)
class CalculateTargetQuery:
    """Query to calculate a nutrition target.

    Attributes:
        biometric: Finished biometric profile from onboarding/profile edit
        goal: Weight goal, pace and target
        today: Reference date for the goal date (defaults to today)
    """

    biometric: BiometricProfile
    goal: GoalProfile
    today: Optional[date] = None


class CalculateTargetQueryHandler:
    """Handler for CalculateTargetQuery.

    Read-only: nothing is persisted; the caller stores or displays the
    returned target.
    """

    def __init__(self, orchestrator: TargetOrchestrator):
        self._orchestrator = orchestrator

    def handle(self, query: CalculateTargetQuery) -> NutritionTarget:
        """
        Handle calculate target query.

        Args:
            query: CalculateTargetQuery with profiles

        Returns:
            NutritionTarget: Freshly computed target

        Raises:
            InvalidInputError: If inputs are invalid
        """
        return self._orchestrator.calculate(
            biometric=query.biometric,
            goal=query.goal,
            today=query.today,
        )
