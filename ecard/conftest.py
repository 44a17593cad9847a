import os
from contextlib import asynccontextmanager

# Must be set before ecard.config builds the engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./ecard.db")

import pytest
from httpx import ASGITransport, AsyncClient

from ecard.config.database import async_session_maker, engine
from ecard.main import app
from ecard.models.metadata import metadata
from ecard.tests.inmemory_models import HOST_ID


@pytest.fixture
async def db_session():
    """A session on a freshly created test schema, dropped again afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)


@pytest.fixture
def client_factory():
    @asynccontextmanager
    async def factory(overrides: dict | None = None, headers: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        # unhandled errors should reach the 500 handler instead of the test
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        try:
            async with AsyncClient(
                transport=transport, base_url="http://test", headers=headers
            ) as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as client:
        yield client


@pytest.fixture
def host_headers():
    return {"X-Host-Id": HOST_ID}
