"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- Application settings
- Database sessions (regular and service role)
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.config import Settings
from collab.core.errors import OperationError
from collab.db.session import Database

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Dependency for the settings the application was created with."""
    return request.app.state.settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions.

    Yields:
        An async database session subject to row-level policies.
    """
    database: Database = request.app.state.database
    async for session in database.session():
        yield session


async def get_admin_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for privileged sessions bound to the service role.

    Only admin routes may depend on this.

    Raises:
        OperationError: If no service role credential is configured.
    """
    database: Database | None = request.app.state.service_database
    if database is None:
        logger.error("Admin route called without a service role database configured")
        raise OperationError("Missing database URL or service role credential")

    async for session in database.session():
        yield session
