"""Profile API routes."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from collab.api.deps import get_db
from collab.api.handlers import build_model, delegate, require_text, require_user_id
from collab.api.schemas import (
    BrandProfileRequest,
    BrandProfileResponse,
    CreatorProfileRequest,
    CreatorProfileResponse,
    ErrorResponse,
)
from collab.data.profiles import create_brand_profile, create_creator_profile
from collab.db.models import (
    BrandProfileData,
    BrandProfileRead,
    CreatorProfileData,
    CreatorProfileRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/profiles",
    tags=["profiles"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/brand", response_model=BrandProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    payload: BrandProfileRequest | None = None,
    session: AsyncSession = Depends(get_db),
) -> BrandProfileResponse:
    """Create a brand profile for a user.

    If the user already has one it is updated with the supplied fields.

    Args:
        payload: ``userId``, ``company_name``, and optional profile fields.
        session: Database session.

    Returns:
        The stored profile.
    """
    payload = payload or BrandProfileRequest()
    user_id = require_user_id(payload.user_id)
    company_name = require_text(payload.company_name, "Company name is required")

    profile_data = build_model(
        BrandProfileData,
        company_name=company_name,
        **payload.model_dump(
            include={"vertical", "ad_spend_range", "bio", "previous_campaigns"},
            exclude_unset=True,
        ),
    )

    logger.info(f"Creating brand profile for user {user_id}: {company_name}")

    profile = await delegate(
        create_brand_profile(session, user_id, profile_data),
        "Failed to create brand profile",
    )
    return BrandProfileResponse(profile=BrandProfileRead.model_validate(profile))


@router.post("/creator", response_model=CreatorProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_creator(
    payload: CreatorProfileRequest | None = None,
    session: AsyncSession = Depends(get_db),
) -> CreatorProfileResponse:
    """Create a creator profile for a user, or update the one they have.

    Only ``userId`` is required; every profile field is optional.
    """
    payload = payload or CreatorProfileRequest()
    user_id = require_user_id(payload.user_id)

    profile_data = build_model(
        CreatorProfileData,
        **payload.model_dump(exclude={"user_id"}, exclude_unset=True),
    )

    logger.info(f"Creating creator profile for user {user_id}")

    profile = await delegate(
        create_creator_profile(session, user_id, profile_data),
        "Failed to create creator profile",
    )
    return CreatorProfileResponse(profile=CreatorProfileRead.model_validate(profile))
