"""Shared fixtures for API integration tests."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from studbook.database import get_db
from studbook.main import app


@pytest.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    # Every request shares the test session, which is rolled back afterwards
    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.pop(get_db, None)
