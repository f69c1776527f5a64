"""Nutrition target GraphQL resolvers."""

from graphql_api.resolvers.nutrition_target.queries import NutritionTargetQueries

__all__ = [
    "NutritionTargetQueries",
]
