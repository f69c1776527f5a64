from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# Local application imports
from graphql_api.context import GraphQLContext, create_context
from graphql_api.schema import create_schema
from infrastructure.config import get_app_version, get_log_level, load_env_file
from infrastructure.nutrition_target.strategy_factory import (
    create_target_orchestrator,
)

load_env_file()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()

# Stateless pipeline: one orchestrator serves every request
_target_orchestrator = create_target_orchestrator()

schema = create_schema()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "lifespan.ready",
        extra={
            "version": APP_VERSION,
            "macro_strategy": _target_orchestrator.macro_strategy_name,
        },
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Nutrition Target Service",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context() -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return create_context(target_orchestrator=_target_orchestrator)


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
