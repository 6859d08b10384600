"""Message API routes."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from collab.api.deps import get_db
from collab.api.handlers import delegate, parse_path_id
from collab.api.schemas import ErrorResponse, SuccessResponse
from collab.data.messages import mark_message_as_read

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/messages",
    tags=["messages"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.put("/{message_id}/read", response_model=SuccessResponse)
async def mark_read(
    message_id: str,
    session: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Mark a single message as read. Already-read messages are left as they are.

    A ``message_id`` that is not a UUID is rejected with 400 "Invalid message
    ID format" before any database call; every other failure is a 500.
    """
    message_uuid = parse_path_id(message_id, "message")

    await delegate(mark_message_as_read(session, message_uuid), "Failed to mark message as read")
    return SuccessResponse()
