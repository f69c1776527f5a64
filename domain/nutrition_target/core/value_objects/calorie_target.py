"""CalorieTarget value object - goal-adjusted daily calories."""

from dataclasses import dataclass
from typing import Tuple

from .target_warning import TargetWarning


@dataclass(frozen=True)
class CalorieTarget:
    """Output of the goal adjustment stage.

    Attributes:
        daily_calories: Final rounded intake in kcal/day (floor applied)
        requested_adjustment: Signed adjustment asked for by goal and pace
        adjustment: Signed adjustment after the deficit cap, before the floor
        warnings: Safety interventions applied while adjusting
    """

    daily_calories: int
    requested_adjustment: float
    adjustment: float
    warnings: Tuple[TargetWarning, ...] = ()

    @property
    def below_safe_minimum(self) -> bool:
        return TargetWarning.BELOW_SAFE_MINIMUM in self.warnings

    @property
    def deficit_capped(self) -> bool:
        return TargetWarning.DEFICIT_CAPPED in self.warnings
