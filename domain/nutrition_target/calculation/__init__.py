"""Calculation services for nutrition targets."""

from .bmr_service import BMRService
from .goal_adjustment_service import GoalAdjustmentService, max_safe_deficit
from .macro_service import MacroService
from .macro_strategies import (
    MacroStrategyKind,
    PercentageSplitStrategy,
    WeightAnchoredStrategy,
)
from .tdee_service import TDEEService
from .timeline import estimated_goal_date, weeks_to_goal

__all__ = [
    "BMRService",
    "TDEEService",
    "GoalAdjustmentService",
    "MacroService",
    "MacroStrategyKind",
    "WeightAnchoredStrategy",
    "PercentageSplitStrategy",
    "max_safe_deficit",
    "weeks_to_goal",
    "estimated_goal_date",
]
