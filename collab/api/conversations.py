"""Conversation API routes."""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from collab.api.deps import get_db
from collab.api.handlers import delegate, parse_path_id, require_user_id
from collab.api.schemas import ConversationResponse, ErrorResponse, SuccessResponse, UserIdBody
from collab.data.conversations import get_conversation_by_id
from collab.data.messages import mark_as_read

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/conversations",
    tags=["conversations"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("/{conversation_id}", response_model=ConversationResponse)
async def get_conversation(
    conversation_id: str,
    user_id: str | None = Query(default=None, alias="userId", description="Viewing participant"),
    session: AsyncSession = Depends(get_db),
) -> ConversationResponse:
    """Get a conversation with its match and the other participant.

    Args:
        conversation_id: The conversation ID.
        user_id: The participant viewing the conversation.
        session: Database session.

    Returns:
        The conversation, from ``user_id``'s side.
    """
    viewer_id = require_user_id(user_id)
    conversation_uuid = parse_path_id(conversation_id, "conversation")

    logger.info(f"Fetching conversation {conversation_uuid} for user {viewer_id}")

    conversation = await delegate(
        get_conversation_by_id(session, conversation_uuid, viewer_id),
        "Failed to fetch conversation",
    )
    return ConversationResponse(conversation=conversation)


@router.put("/{conversation_id}/read", response_model=SuccessResponse)
async def mark_conversation_read(
    conversation_id: str,
    payload: UserIdBody | None = None,
    session: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Mark every message the other participant sent as read."""
    reader_id = require_user_id(payload.user_id if payload else None)
    conversation_uuid = parse_path_id(conversation_id, "conversation")

    await delegate(
        mark_as_read(session, conversation_uuid, reader_id),
        "Failed to mark messages as read",
    )
    return SuccessResponse()
