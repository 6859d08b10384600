"""Message read-receipt helpers."""

import logging
import uuid

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.result import Err, Ok, Result
from collab.db.models import Message, utcnow

logger = logging.getLogger(__name__)


async def mark_as_read(
    session: AsyncSession,
    conversation_id: uuid.UUID,
    user_id: uuid.UUID,
) -> Result[int]:
    """Mark every unread message in a conversation as read by ``user_id``.

    Messages the user sent themselves are left alone.

    Returns:
        Number of messages marked.
    """
    try:
        statement = (
            update(Message)
            .where(
                Message.conversation_id == conversation_id,
                Message.sender_id != user_id,
                Message.read_at.is_(None),
            )
            .values(read_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(statement)
        await session.commit()

        logger.info(f"Marked {result.rowcount} messages read in conversation {conversation_id}")
        return Ok(result.rowcount)

    except SQLAlchemyError as e:
        logger.error(f"Error marking messages as read: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to mark messages as read: {e}")


async def mark_message_as_read(session: AsyncSession, message_id: uuid.UUID) -> Result[int]:
    """Mark a single message as read if it is not already."""
    try:
        statement = (
            update(Message)
            .where(Message.id == message_id, Message.read_at.is_(None))
            .values(read_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(statement)
        await session.commit()

        return Ok(result.rowcount)

    except SQLAlchemyError as e:
        logger.error(f"Error marking message as read: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to mark message as read: {e}")
