"""GraphQL schema factory.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from graphql_api.resolvers.nutrition_target import NutritionTargetQueries


@strawberry.type
class Query(NutritionTargetQueries):
    @strawberry.field
    def health(self) -> str:
        return "ok"


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    return strawberry.Schema(query=Query)
