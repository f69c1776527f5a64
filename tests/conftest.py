"""App-level test fixtures.

Loads the FastAPI app for HTTP tests. Unit tests in tests/unit/ only
import the layers they exercise.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, cast

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app import app


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the app through ASGITransport."""
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
