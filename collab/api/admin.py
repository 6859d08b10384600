"""Admin API routes.

User listing and verification. These run on the service role session,
which bypasses row-level policies.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from collab.api.deps import get_admin_db
from collab.api.handlers import delegate, require_uuid
from collab.api.schemas import ErrorResponse, UserListResponse, UserResponse, VerifyUserRequest
from collab.core.errors import ValidationError
from collab.data.users import list_users, toggle_user_verification
from collab.db.models import UserRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/users",
    tags=["admin"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

VERIFY_FIELDS_REQUIRED = "User ID and verified status are required"


@router.get("", response_model=UserListResponse)
async def get_all_users(
    session: AsyncSession = Depends(get_admin_db),
) -> UserListResponse:
    """List every user, newest first."""
    users = await delegate(list_users(session), "Failed to fetch users")
    return UserListResponse(users=[UserRead.model_validate(user) for user in users])


@router.post("/verify", response_model=UserResponse, status_code=status.HTTP_200_OK)
async def verify_user(
    payload: VerifyUserRequest | None = None,
    session: AsyncSession = Depends(get_admin_db),
) -> UserResponse:
    """Set or clear a user's verified badge.

    Args:
        payload: ``userId`` and a boolean ``verified``.
        session: Service role database session.

    Returns:
        The updated user.

    Raises:
        ValidationError: If ``userId`` is missing or ``verified`` is not a boolean.
        OperationError: If the update fails.
    """
    payload = payload or VerifyUserRequest()
    if not isinstance(payload.verified, bool):
        raise ValidationError(VERIFY_FIELDS_REQUIRED)
    user_id = require_uuid(payload.user_id, missing=VERIFY_FIELDS_REQUIRED, label="user")

    logger.info(f"Setting verified={payload.verified} for user {user_id}")

    user = await delegate(
        toggle_user_verification(session, user_id, payload.verified),
        "Failed to toggle verification",
    )
    return UserResponse(user=UserRead.model_validate(user))
