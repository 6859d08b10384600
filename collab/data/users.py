"""User and admin data-access helpers."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.errors import OperationFailure
from collab.core.result import Err, Ok, Result
from collab.db.models import User

logger = logging.getLogger(__name__)


async def get_user(session: AsyncSession, user_id: uuid.UUID) -> User | None:
    """Fetch a user by id, or None if it does not exist."""
    return await session.get(User, user_id)


async def list_users(session: AsyncSession) -> Result[list[User]]:
    """List every user, newest first."""
    try:
        result = await session.execute(select(User).order_by(User.created_at.desc()))
        users = list(result.scalars().all())

        logger.info(f"Found {len(users)} users")
        return Ok(users)

    except SQLAlchemyError as e:
        logger.error(f"Error fetching users: {e}", exc_info=True)
        return Err.of(f"Failed to fetch users: {e}")


async def toggle_user_verification(
    session: AsyncSession,
    user_id: uuid.UUID,
    verified: bool,
) -> Result[User]:
    """Set a user's verified flag and return the updated user."""
    try:
        user = await get_user(session, user_id)

        if user is None:
            logger.warning(f"User not found for verification: {user_id}")
            return Err.of(
                "Failed to toggle verification: user not found",
                OperationFailure.NOT_FOUND,
            )

        user.verified = verified
        session.add(user)
        await session.commit()
        await session.refresh(user)

        logger.info(f"Set verified={verified} for user {user_id}")
        return Ok(user)

    except SQLAlchemyError as e:
        logger.error(f"Error toggling user verification: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to toggle verification: {e}")
