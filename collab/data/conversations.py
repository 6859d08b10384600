"""Conversation data-access helpers."""

import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.errors import OperationFailure
from collab.core.result import Err, Ok, Result
from collab.data.profiles import get_profile_for, to_profile_read
from collab.data.users import get_user
from collab.db.models import (
    Conversation,
    ConversationDetail,
    Match,
    MatchRead,
    UserRead,
)

logger = logging.getLogger(__name__)


async def get_conversation_by_id(
    session: AsyncSession,
    conversation_id: uuid.UUID,
    user_id: uuid.UUID,
) -> Result[ConversationDetail]:
    """Load a conversation as seen by ``user_id``.

    The result carries the match plus the other participant and their
    profile (creator or brand, by role).
    """
    try:
        conversation = await session.get(Conversation, conversation_id)
        if conversation is None:
            logger.warning(f"Conversation not found: {conversation_id}")
            return Err.of("Conversation not found", OperationFailure.NOT_FOUND)

        match = await session.get(Match, conversation.match_id)
        if match is None:
            logger.warning(f"Match {conversation.match_id} missing for conversation {conversation_id}")
            return Err.of("Match not found", OperationFailure.NOT_FOUND)

        other_user_id = match.brand_id if match.creator_id == user_id else match.creator_id
        other_user = await get_user(session, other_user_id)
        other_profile = await get_profile_for(session, other_user)

        return Ok(
            ConversationDetail(
                id=conversation.id,
                match_id=conversation.match_id,
                created_at=conversation.created_at,
                updated_at=conversation.updated_at,
                match=MatchRead.model_validate(match),
                other_user=UserRead.model_validate(other_user) if other_user else None,
                other_profile=to_profile_read(other_profile),
            )
        )

    except SQLAlchemyError as e:
        logger.error(f"Error fetching conversation {conversation_id}: {e}", exc_info=True)
        return Err.of(f"Failed to fetch conversation: {e}")
