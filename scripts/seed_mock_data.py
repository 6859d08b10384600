"""Seed mock users and profiles.

Reads ``mock-data/users.json`` (or the path given as the first argument)
and upserts each user with its brand or creator profile. Existing rows are
updated in place, so the script can be re-run.

Expected file shape::

    {"users": [{"id": "...", "role": "creator", "verified": false,
                "created_at": "2024-01-01T00:00:00Z",
                "profile": {"instagram_handle": "...", "bio": "..."}}]}

Usage:
    python -m scripts.seed_mock_data [path/to/users.json]
"""

import asyncio
import datetime
import json
import sys
import uuid
from pathlib import Path
from typing import Any

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.config import get_settings
from collab.core.logging_config import get_logger
from collab.data.profiles import get_brand_profile, get_creator_profile
from collab.db.models import BrandProfile, CreatorProfile, User, UserRole
from collab.db.session import Database

logger = get_logger(__name__)

CREATOR_FIELDS = (
    "instagram_handle",
    "tiktok_handle",
    "follower_count_ig",
    "follower_count_tiktok",
    "bio",
)
BRAND_FIELDS = ("company_name", "vertical", "ad_spend_range", "bio")


async def seed_user(session: AsyncSession, entry: dict[str, Any]) -> User:
    """Upsert one user and its profile."""
    user_id = uuid.UUID(entry["id"])
    role = UserRole(entry["role"])
    created_at = datetime.datetime.fromisoformat(entry["created_at"].replace("Z", "+00:00"))

    user = await session.merge(
        User(
            id=user_id,
            role=role,
            verified=bool(entry.get("verified", False)),
            created_at=created_at,
            updated_at=created_at,
        )
    )

    profile_data = entry.get("profile") or {}
    if role == UserRole.CREATOR:
        fields = {name: profile_data.get(name) for name in CREATOR_FIELDS}
        profile = await get_creator_profile(session, user_id) or CreatorProfile(
            user_id=user_id, created_at=created_at
        )
    else:
        fields = {name: profile_data.get(name) for name in BRAND_FIELDS}
        profile = await get_brand_profile(session, user_id) or BrandProfile(
            user_id=user_id, company_name=fields["company_name"], created_at=created_at
        )

    for name, value in fields.items():
        setattr(profile, name, value)
    profile.updated_at = created_at
    session.add(profile)

    return user


async def main(path: Path) -> None:
    """Seed every user in ``path``."""
    mock_data = json.loads(path.read_text(encoding="utf-8"))
    users = mock_data["users"]

    print(f"Seeding {len(users)} users...")

    database = Database.from_settings(get_settings())
    seeded = {UserRole.CREATOR: 0, UserRole.BRAND: 0}

    try:
        async for session in database.session():
            for entry in users:
                try:
                    user = await seed_user(session, entry)
                    await session.commit()
                    seeded[user.role] += 1
                except Exception as e:
                    logger.error(f"Error seeding user {entry.get('id')}: {e}", exc_info=True)
                    await session.rollback()
    finally:
        await database.close()

    print("Mock data seeding completed!")
    print(f"Creators: {seeded[UserRole.CREATOR]}")
    print(f"Brands: {seeded[UserRole.BRAND]}")


if __name__ == "__main__":
    default_path = project_root / "mock-data" / "users.json"
    asyncio.run(main(Path(sys.argv[1]) if len(sys.argv) > 1 else default_path))
