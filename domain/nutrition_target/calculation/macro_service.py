"""MacroService - Macronutrient distribution calculation."""

import logging
from typing import Optional, Union

from ..core.ports.calculators import IMacroCalculator, IMacroStrategy
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.validation import (
    MAX_WEIGHT_KG,
    coerce_enum,
    require_positive,
)
from ..core.value_objects.weight_goal import WeightGoal
from .macro_strategies import WeightAnchoredStrategy

logger = logging.getLogger(__name__)


class MacroService(IMacroCalculator):
    """Calculate macronutrient distribution for a calorie target.

    Delegates the split to an ``IMacroStrategy``; the weight-anchored
    strategy is used unless another one is injected.

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def __init__(self, strategy: Optional[IMacroStrategy] = None):
        self._strategy = strategy or WeightAnchoredStrategy()

    @property
    def strategy(self) -> IMacroStrategy:
        return self._strategy

    def calculate(
        self,
        daily_calories: int,
        weight_kg: float,
        weight_goal: Union[WeightGoal, str],
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            daily_calories: Daily calorie target
            weight_kg: Body weight in kg
            weight_goal: Weight goal

        Returns:
            MacroSplit: Protein/carbs/fat in grams

        Raises:
            InvalidInputError: If calories or weight are not positive,
                or the goal is not recognized
        """
        require_positive(daily_calories, "daily_calories")
        require_positive(weight_kg, "weight_kg", MAX_WEIGHT_KG)
        weight_goal = coerce_enum(WeightGoal, weight_goal, "weight_goal")

        split = self._strategy.split(daily_calories, weight_kg, weight_goal)
        if split.carbs_g == 0:
            logger.info(
                "macros.carbs_exhausted",
                extra={
                    "daily_calories": daily_calories,
                    "weight_kg": weight_kg,
                    "strategy": self._strategy.name,
                },
            )
        return split
