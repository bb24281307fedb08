"""
Shared fixtures: a throwaway SQLite database per test and an in-process
HTTP client bound to a fresh app.
"""

import httpx
import pytest
import pytest_asyncio

from config.settings import Settings
from database.session import build_engine, build_session_factory, init_models
from main import create_app

TEST_SECRET = "test-jwt-secret"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        auto_create_tables=True,
    )


@pytest_asyncio.fixture
async def session(settings):
    """A bare AsyncSession on an initialised schema, for store-level tests."""
    engine = build_engine(settings.database_url)
    await init_models(engine)
    factory = build_session_factory(engine)
    async with factory() as s:
        yield s
    await engine.dispose()


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    # ASGITransport does not run the lifespan, so create the schema here.
    await init_models(application.state.engine)
    yield application
    application.dependency_overrides.clear()
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
