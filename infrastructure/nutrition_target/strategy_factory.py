"""Macro strategy factory.

Environment-based selection of the macro split algorithm.
Strategy:
- MACRO_STRATEGY=weight_anchored (default): protein from g/kg bodyweight
- MACRO_STRATEGY=percentage_split: fixed P/C/F shares per goal

Usage:
    from infrastructure.nutrition_target.strategy_factory import (
        create_target_orchestrator,
    )

    orchestrator = create_target_orchestrator()  # strategy from env
"""

import logging
from typing import Optional

from application.nutrition_target.orchestrators.target_orchestrator import (
    TargetOrchestrator,
)
from domain.nutrition_target.calculation.macro_service import MacroService
from domain.nutrition_target.calculation.macro_strategies import (
    MacroStrategyKind,
    strategy_class,
)
from domain.nutrition_target.core.ports.calculators import IMacroStrategy
from infrastructure.config import get_macro_strategy

logger = logging.getLogger(__name__)


def create_macro_strategy(name: Optional[str] = None) -> IMacroStrategy:
    """Create macro strategy based on MACRO_STRATEGY env var.

    Args:
        name: Explicit strategy name; overrides the environment

    Returns:
        IMacroStrategy: Strategy instance

    Raises:
        ValueError: If the name is not a known strategy

    Example:
        # In .env:
        MACRO_STRATEGY=percentage_split
    """
    mode = (name or get_macro_strategy()).strip().lower()
    try:
        kind = MacroStrategyKind(mode)
    except ValueError as e:
        allowed = ", ".join(k.value for k in MacroStrategyKind)
        raise ValueError(
            f"MACRO_STRATEGY={mode!r} is not supported. Use one of: {allowed}"
        ) from e

    logger.info("macro_strategy.selected", extra={"strategy": kind.value})
    return strategy_class(kind)()


def create_target_orchestrator(
    strategy_name: Optional[str] = None,
) -> TargetOrchestrator:
    """Wire the four calculation stages with the configured strategy."""
    macro_service = MacroService(strategy=create_macro_strategy(strategy_name))
    return TargetOrchestrator(macro_service=macro_service)
