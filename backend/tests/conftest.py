"""
Survey API Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked session, real SQLite app, API client).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── pwd_context:     Fast bcrypt context (4 rounds)
    ├── test_app:        App built on a temporary SQLite file with tables created
    ├── db_session:      Direct session on test_app's database, for assertions
    └── test_client:     HTTPX AsyncClient routed straight into test_app
"""

import os
import tempfile

# Override settings for testing BEFORE any survey_api imports
# Why: the module-level app in survey_api.main builds an engine on import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="survey_api_test_"), "import.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from survey_api.config import Settings  # noqa: E402
from survey_api.database import create_tables, dispose_engine  # noqa: E402
from survey_api.main import create_app  # noqa: E402
from survey_api.security import create_password_context  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_survey(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = survey
            result = await survey_service.get_survey(mock_db_session, survey_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def pwd_context():
    """bcrypt with the minimum work factor so hashing doesn't slow the suite."""
    return create_password_context(rounds=4)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'survey_test.db'}",
        log_level="WARNING",
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    A fresh application on its own SQLite file.

    ASGITransport does not run the lifespan, so tables are created here.
    """
    app = create_app(test_settings)
    await create_tables(app.state.engine)
    yield app
    await dispose_engine(app.state.engine)


@pytest_asyncio.fixture
async def db_session(test_app):
    """Session on the same database the app under test uses."""
    async with test_app.state.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
