"""Brand and creator profile data-access helpers."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.result import Err, Ok, Result
from collab.db.models import (
    BrandProfile,
    BrandProfileData,
    BrandProfileRead,
    CreatorProfile,
    CreatorProfileData,
    CreatorProfileRead,
    User,
    UserRole,
    utcnow,
)

logger = logging.getLogger(__name__)


async def get_brand_profile(session: AsyncSession, user_id: uuid.UUID) -> BrandProfile | None:
    """Fetch a brand user's profile, or None if they have not created one."""
    result = await session.execute(select(BrandProfile).where(BrandProfile.user_id == user_id))
    return result.scalar_one_or_none()


async def get_creator_profile(session: AsyncSession, user_id: uuid.UUID) -> CreatorProfile | None:
    """Fetch a creator user's profile, or None if they have not created one."""
    result = await session.execute(select(CreatorProfile).where(CreatorProfile.user_id == user_id))
    return result.scalar_one_or_none()


async def get_profile_for(
    session: AsyncSession, user: User | None
) -> BrandProfile | CreatorProfile | None:
    """Fetch the profile matching a user's role."""
    if user is None:
        return None
    if user.role == UserRole.CREATOR:
        return await get_creator_profile(session, user.id)
    return await get_brand_profile(session, user.id)


def to_profile_read(
    profile: BrandProfile | CreatorProfile | None,
) -> BrandProfileRead | CreatorProfileRead | None:
    """Convert a stored profile to its response model."""
    if profile is None:
        return None
    if isinstance(profile, BrandProfile):
        return BrandProfileRead.model_validate(profile)
    return CreatorProfileRead.model_validate(profile)


async def _save_profile(
    session: AsyncSession,
    user_id: uuid.UUID,
    existing: BrandProfile | CreatorProfile | None,
    profile_model: type[BrandProfile] | type[CreatorProfile],
    profile_data: BrandProfileData | CreatorProfileData,
) -> BrandProfile | CreatorProfile:
    # A second create for the same user updates the supplied fields only
    if existing is None:
        profile = profile_model(user_id=user_id, **profile_data.model_dump())
    else:
        profile = existing
        for field, value in profile_data.model_dump(exclude_unset=True).items():
            setattr(profile, field, value)
        profile.updated_at = utcnow()

    session.add(profile)
    await session.commit()
    await session.refresh(profile)
    return profile


async def create_brand_profile(
    session: AsyncSession,
    user_id: uuid.UUID,
    profile_data: BrandProfileData,
) -> Result[BrandProfile]:
    """Create a brand profile, or update it if the user already has one.

    On update only the fields present in ``profile_data`` are written.
    """
    try:
        existing = await get_brand_profile(session, user_id)
        if existing is None:
            logger.info(f"Creating brand profile for user {user_id}")
        else:
            logger.info(f"Brand profile exists for user {user_id}, updating instead")

        profile = await _save_profile(session, user_id, existing, BrandProfile, profile_data)
        return Ok(profile)

    except SQLAlchemyError as e:
        logger.error(f"Error creating brand profile: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to create brand profile: {e}")


async def create_creator_profile(
    session: AsyncSession,
    user_id: uuid.UUID,
    profile_data: CreatorProfileData,
) -> Result[CreatorProfile]:
    """Create a creator profile, or update it if the user already has one."""
    try:
        existing = await get_creator_profile(session, user_id)
        if existing is None:
            logger.info(f"Creating creator profile for user {user_id}")
        else:
            logger.info(f"Creator profile exists for user {user_id}, updating instead")

        profile = await _save_profile(session, user_id, existing, CreatorProfile, profile_data)
        return Ok(profile)

    except SQLAlchemyError as e:
        logger.error(f"Error creating creator profile: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to create creator profile: {e}")
