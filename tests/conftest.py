"""
Noteful API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Endpoint tests run the real application against an in-memory SQLite
       database (aiosqlite + StaticPool), created fresh for every test.
       Service tests use AsyncMock stores and sessions instead.

Fixture Hierarchy (all function-scoped):
    ├── test_settings:   frozen Settings pointing at sqlite+aiosqlite://
    ├── app:             create_app(test_settings) with tables created
    ├── client:          AsyncClient sending the valid bearer token
    ├── anon_client:     AsyncClient sending no Authorization header
    ├── lenient_client:  like `client`, but returns 500 responses instead of
    │                    re-raising the app's exception
    ├── db_session:      session on the app's engine, for seeding rows
    └── mock_db_session: AsyncMock session for service unit tests
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Environment for the module-level `noteful.main.app`, set BEFORE any app import
os.environ["API_KEY"] = "49d6cc60-c0bb-47df-8472-c44ec0def09f"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from noteful.config import Settings
from noteful.database import Base
from noteful.main import create_app
from noteful.models import Folder, Note

TEST_TOKEN = "49d6cc60-c0bb-47df-8472-c44ec0def09f"
AUTH_HEADERS = {"Authorization": f"Bearer {TEST_TOKEN}"}


# ══════════════════════════════════════════════════════════════════════════
# Test data
# ══════════════════════════════════════════════════════════════════════════

def make_folders_array():
    return [
        {"id": 1, "foldername": "Important"},
        {"id": 2, "foldername": "Super"},
        {"id": 3, "foldername": "Spangley"},
    ]


def make_notes_array():
    modified = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)
    return [
        {"id": 1, "notename": "Dogs", "content": "Corporis accusamus placeat", "folderid": 1, "modified": modified},
        {"id": 2, "notename": "Cats", "content": "Eos laudantium quia ab blanditiis", "folderid": 2, "modified": modified},
        {"id": 3, "notename": "Pigs", "content": "Occaecati dignissimos quam qui facere", "folderid": 3, "modified": modified},
        {"id": 4, "notename": "Birds", "content": "Eum culpa odit veniam", "folderid": 1, "modified": modified},
    ]


async def seed(session, folders=(), notes=()):
    """Insert raw rows directly, bypassing the API (and its escaping)."""
    session.add_all(Folder(**f) for f in folders)
    await session.flush()
    session.add_all(Note(**n) for n in notes)
    await session.commit()


# ══════════════════════════════════════════════════════════════════════════
# Application fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings():
    return Settings(
        api_key=TEST_TOKEN,
        database_url="sqlite+aiosqlite://",
        log_level="WARNING",
        _env_file=None,
    )


@pytest_asyncio.fixture
async def app(test_settings):
    application = create_app(test_settings)
    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", headers=AUTH_HEADERS) as c:
        yield c


@pytest_asyncio.fixture
async def anon_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def lenient_client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test", headers=AUTH_HEADERS) as c:
        yield c


@pytest_asyncio.fixture
async def db_session(app):
    async with app.state.session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession. Services never touch it directly; it is passed
    through to a mocked store so calls can be asserted on.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_store():
    store = MagicMock()
    for name in (
        "get_all_folders",
        "get_folder_by_id",
        "insert_folder",
        "get_all_notes",
        "get_note_by_id",
        "insert_note",
        "delete_note",
    ):
        setattr(store, name, AsyncMock())
    return store
