"""Queries for nutrition target calculation."""

from .calculate_target import CalculateTargetQuery, CalculateTargetQueryHandler

__all__ = [
    "CalculateTargetQuery",
    "CalculateTargetQueryHandler",
]
