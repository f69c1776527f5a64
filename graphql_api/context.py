"""GraphQL context factory for dependency injection."""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.nutrition_target.orchestrators.target_orchestrator import (
    TargetOrchestrator,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using ``info.context.get("name")``.

    Attributes:
        target_orchestrator: Runs the nutrition target pipeline
        request: FastAPI request object
    """

    def __init__(
        self,
        target_orchestrator: TargetOrchestrator,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.target_orchestrator = target_orchestrator
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (None if not found).

        Example:
            >>> orchestrator = info.context.get("target_orchestrator")
        """
        return getattr(self, key, None)


def create_context(
    target_orchestrator: TargetOrchestrator,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return GraphQLContext(
        target_orchestrator=target_orchestrator,
        request=request,
    )
