"""Domain exceptions for nutrition target calculation."""

from .domain_errors import InvalidInputError, NutritionTargetError

__all__ = [
    "NutritionTargetError",
    "InvalidInputError",
]
