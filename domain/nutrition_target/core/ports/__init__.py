"""Ports for nutrition target domain."""

from .calculators import (
    IBMRCalculator,
    IGoalAdjustmentCalculator,
    IMacroCalculator,
    IMacroStrategy,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IGoalAdjustmentCalculator",
    "IMacroCalculator",
    "IMacroStrategy",
]
