"""Shared test fixtures."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from collab.api.deps import get_admin_db, get_db
from collab.core.config import Settings
from collab.db.session import Database
from collab.main import create_app

# Stands in for a database session in route tests, where helpers are patched
FAKE_SESSION = object()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'collab.db'}"
    return Settings(
        database_url=url,
        service_role_database_url=url,
        log_level="INFO",
        log_dir=None,
    )


@pytest.fixture
def restore_root_logging():
    """Put the root logger's handlers back after tests that reconfigure logging."""
    root = logging.getLogger()
    # pytest attaches and detaches its own capture handlers per phase
    handlers = [h for h in root.handlers if not type(h).__module__.startswith("_pytest")]
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers and not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def app(settings, restore_root_logging):
    """Application whose database dependencies yield a placeholder session."""
    application = create_app(settings)

    async def fake_db():
        yield FAKE_SESSION

    application.dependency_overrides[get_db] = fake_db
    application.dependency_overrides[get_admin_db] = fake_db
    return application


@pytest.fixture
def client(app) -> TestClient:
    """HTTP client for the patched application."""
    return TestClient(app)


@pytest.fixture
def run_db(tmp_path) -> Callable[[Callable[[AsyncSession], Awaitable[Any]]], Any]:
    """Run a scenario against a fresh SQLite database.

    The whole scenario runs inside one ``asyncio.run`` call so the engine
    never outlives its event loop.
    """
    url = f"sqlite+aiosqlite:///{tmp_path / 'helpers.db'}"

    def run(scenario: Callable[[AsyncSession], Awaitable[Any]]) -> Any:
        async def runner() -> Any:
            database = Database(url)
            await database.create_all_tables()
            try:
                async with database.session_maker() as session:
                    return await scenario(session)
            finally:
                await database.close()

        return asyncio.run(runner())

    return run
