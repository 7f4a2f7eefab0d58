"""API test fixtures.

This conftest loads the full app and injects an in-memory repository through
FastAPI's dependency overrides, so API tests never need a MongoDB server.
The lifespan is not run by ASGITransport; tests for it live in
test_app_lifespan.py and drive it directly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test if present (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

os.environ.setdefault("USER_REPOSITORY", "inmemory")

from api.dependencies import get_user_repository  # noqa: E402
from app import app  # noqa: E402
from domain.user.core.ports.user_repository import IUserRepository  # noqa: E402
from infrastructure.user.in_memory_user_repository import (  # noqa: E402
    InMemoryUserRepository,
)


@pytest.fixture
def user_repository() -> IUserRepository:
    """Repository injected into the app; override per module for failure cases."""
    return InMemoryUserRepository()


@pytest_asyncio.fixture
async def client(user_repository: IUserRepository) -> AsyncIterator[AsyncClient]:
    """Client HTTP asincrono per test REST.

    Usa httpx.AsyncClient con ASGITransport esplicito e base_url fittizia
    per coerenza nelle richieste relative.
    """
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    transport = ASGITransport(app=cast(Any, app))
    try:
        async with AsyncClient(
            transport=transport,
            base_url="http://testserver",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_user_repository, None)
