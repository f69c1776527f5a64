"""Infrastructure wiring for nutrition target calculation."""

from infrastructure.nutrition_target.strategy_factory import (
    create_macro_strategy,
    create_target_orchestrator,
)

__all__ = [
    "create_macro_strategy",
    "create_target_orchestrator",
]
