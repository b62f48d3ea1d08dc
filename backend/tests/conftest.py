"""
MyNotes Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (stores, API client, spy store).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── note_store: every NoteStore adapter (parametrized: memory, sql)
    ├── spy_store: AsyncMock with the NoteStore interface
    ├── file_engine: engine over a throwaway SQLite file (real locking)
    ├── test_client: HTTPX AsyncClient over a fresh app, per store adapter
    ├── scopeless_client: SQL client whose sessions are closed uncommitted
    └── spy_client: HTTPX AsyncClient whose store is spy_store

    The SQL adapter runs on a private in-memory aiosqlite database, so
    no test touches a real database file.
"""

import os

# Override settings for testing BEFORE any mynotes imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["NOTE_STORE"] = "memory"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mynotes.database import create_tables, session_scope
from mynotes.dependencies import get_note_store
from mynotes.main import create_app
from mynotes.services.memory_store import MemoryNoteStore
from mynotes.services.note_store import NoteStore
from mynotes.services.sql_store import SqlNoteStore

STORE_BACKENDS = ["memory", "sql"]


def make_test_engine() -> AsyncEngine:
    """One shared connection, so every session sees the same in-memory database."""
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


# ══════════════════════════════════════════════════════════════════════════
# Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture(params=STORE_BACKENDS)
async def note_store(request):
    """
    Provides each NoteStore adapter in turn.

    The SQL store shares one session for the whole test, as it would
    inside a single request.
    """
    if request.param == "memory":
        yield MemoryNoteStore()
        return

    engine = make_test_engine()
    await create_tables(engine)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_scope(factory) as session:
        yield SqlNoteStore(session)
    await engine.dispose()


@pytest.fixture
def spy_store():
    """
    A store that records calls and answers nothing by default.

    Usage:
        spy_store.get.return_value = StoreResult.absent()
    """
    return AsyncMock(spec=NoteStore)


# ══════════════════════════════════════════════════════════════════════════
# API Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture(params=STORE_BACKENDS)
async def test_client(request):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient talking to a fresh app through ASGITransport.
    How:     get_note_store is overridden per adapter. The SQL variant opens
             a new session per request and commits it, exactly like
             production, against a private in-memory database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    app = create_app()
    engine = None

    if request.param == "memory":
        store = MemoryNoteStore()

        async def override_store():
            yield store
    else:
        engine = make_test_engine()
        await create_tables(engine)
        factory = async_sessionmaker(engine, expire_on_commit=False)

        async def override_store():
            async with session_scope(factory) as session:
                yield SqlNoteStore(session)

    app.dependency_overrides[get_note_store] = override_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    if engine is not None:
        await engine.dispose()


@pytest_asyncio.fixture
async def spy_client(spy_store):
    """API client whose note store is the spy_store mock."""
    app = create_app()

    async def override_store():
        yield spy_store

    app.dependency_overrides[get_note_store] = override_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def file_engine(tmp_path):
    """
    Engine over a SQLite file, one connection per session.

    Unlike the in-memory StaticPool engine, a second session only sees
    rows the first one has committed.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def scopeless_client(file_engine):
    """
    API client whose per-request sessions are closed without a commit.

    Whatever the handler left uncommitted is rolled back, as it would be
    if the closing commit ran after the response had already gone out.
    """
    app = create_app()
    factory = async_sessionmaker(file_engine, expire_on_commit=False)

    async def override_store():
        async with factory() as session:
            yield SqlNoteStore(session)

    app.dependency_overrides[get_note_store] = override_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
