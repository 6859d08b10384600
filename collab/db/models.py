"""Database models using SQLModel.

Defines the core data models for the collaboration platform:
- User: A brand or a creator account
- BrandProfile / CreatorProfile: One public profile per user, by role
- Match / Conversation / Message: Shortlisted pairs and their messaging
- Post / PostLike: Feed posts and who liked them
"""

import datetime
import enum
import uuid
from typing import Any

from pydantic import ConfigDict
from sqlalchemy import JSON, Column, DateTime, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def _id_column() -> Any:
    return Field(
        default_factory=uuid.uuid4,
        sa_column=Column(Uuid, primary_key=True),
    )


def _fk_column(target: str, *, unique: bool = False) -> Any:
    return Field(
        sa_column=Column(
            Uuid,
            ForeignKey(target, ondelete="CASCADE"),
            nullable=False,
            index=True,
            unique=unique,
        )
    )


def _created_at() -> Any:
    return Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), server_default=func.now()),
    )


def _updated_at() -> Any:
    return Field(
        default_factory=utcnow,
        sa_column=Column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
        ),
    )


class UserRole(str, enum.Enum):
    """Which side of the marketplace a user is on."""

    CREATOR = "creator"
    BRAND = "brand"


class MatchStatus(str, enum.Enum):
    """Status of a brand/creator match.

    Only shortlisted matches get a conversation.
    """

    PENDING = "pending"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    MATCHED = "matched"


# =============================================================================
# Shared Models (for API responses, not database tables)
# =============================================================================


class UserBase(SQLModel):
    """Base user fields."""

    role: UserRole
    verified: bool = Field(default=False)


class BrandProfileBase(SQLModel):
    """Base brand profile fields."""

    company_name: str = Field(min_length=1, max_length=255)
    vertical: str | None = Field(default=None, max_length=100)
    ad_spend_range: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None)


class CreatorProfileBase(SQLModel):
    """Base creator profile fields."""

    instagram_handle: str | None = Field(default=None, max_length=100)
    tiktok_handle: str | None = Field(default=None, max_length=100)
    follower_count_ig: int | None = Field(default=None, ge=0)
    follower_count_tiktok: int | None = Field(default=None, ge=0)
    bio: str | None = Field(default=None)


class MatchBase(SQLModel):
    """Base match fields."""

    status: MatchStatus = Field(default=MatchStatus.PENDING)


class PostBase(SQLModel):
    """Base post fields."""

    content: str
    image_url: str | None = Field(default=None, max_length=2048)
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)


# =============================================================================
# Database Models
# =============================================================================


class User(UserBase, table=True):
    """A platform account.

    Authentication lives in the managed identity provider; this row only
    records the role and whether an admin has verified the account.
    """

    __tablename__ = "users"

    id: uuid.UUID = _id_column()
    created_at: datetime.datetime = _created_at()
    updated_at: datetime.datetime = _updated_at()


class BrandProfile(BrandProfileBase, table=True):
    """Public profile of a brand user."""

    __tablename__ = "brand_profiles"

    id: uuid.UUID = _id_column()
    user_id: uuid.UUID = _fk_column("users.id", unique=True)
    previous_campaigns: list[Any] | None = Field(
        default=None,
        sa_column=Column(JSONType),
    )
    created_at: datetime.datetime = _created_at()
    updated_at: datetime.datetime = _updated_at()


class CreatorProfile(CreatorProfileBase, table=True):
    """Public profile of a creator user."""

    __tablename__ = "creator_profiles"

    id: uuid.UUID = _id_column()
    user_id: uuid.UUID = _fk_column("users.id", unique=True)
    portfolio_items: list[Any] | None = Field(
        default=None,
        sa_column=Column(JSONType),
    )
    created_at: datetime.datetime = _created_at()
    updated_at: datetime.datetime = _updated_at()


class Match(MatchBase, table=True):
    """A pairing between one creator and one brand."""

    __tablename__ = "matches"

    id: uuid.UUID = _id_column()
    creator_id: uuid.UUID = _fk_column("users.id")
    brand_id: uuid.UUID = _fk_column("users.id")
    created_at: datetime.datetime = _created_at()
    updated_at: datetime.datetime = _updated_at()


class Conversation(SQLModel, table=True):
    """Message thread attached to a match."""

    __tablename__ = "conversations"

    id: uuid.UUID = _id_column()
    match_id: uuid.UUID = _fk_column("matches.id", unique=True)
    created_at: datetime.datetime = _created_at()
    updated_at: datetime.datetime = _updated_at()


class Message(SQLModel, table=True):
    """A single message in a conversation.

    ``read_at`` stays NULL until the recipient reads it.
    """

    __tablename__ = "messages"

    id: uuid.UUID = _id_column()
    conversation_id: uuid.UUID = _fk_column("conversations.id")
    sender_id: uuid.UUID = _fk_column("users.id")
    content: str
    attachments: list[Any] = Field(
        default_factory=list,
        sa_column=Column(JSONType, nullable=False),
    )
    read_at: datetime.datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
    )
    created_at: datetime.datetime = _created_at()


class Post(PostBase, table=True):
    """A feed post."""

    __tablename__ = "posts"

    id: uuid.UUID = _id_column()
    user_id: uuid.UUID = _fk_column("users.id")
    created_at: datetime.datetime = _created_at()
    updated_at: datetime.datetime = _updated_at()


class PostLike(SQLModel, table=True):
    """One user's like of one post."""

    __tablename__ = "post_likes"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),)

    id: uuid.UUID = _id_column()
    post_id: uuid.UUID = _fk_column("posts.id")
    user_id: uuid.UUID = _fk_column("users.id")
    created_at: datetime.datetime = _created_at()


# =============================================================================
# Response Models
# =============================================================================


class UserRead(UserBase):
    """User response model."""

    id: uuid.UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime


class BrandProfileRead(BrandProfileBase):
    """Brand profile response model."""

    id: uuid.UUID
    user_id: uuid.UUID
    previous_campaigns: list[Any] | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class BrandProfileData(SQLModel):
    """Writable brand profile fields."""

    company_name: str = Field(min_length=1, max_length=255)
    vertical: str | None = Field(default=None, max_length=100)
    ad_spend_range: str | None = Field(default=None, max_length=100)
    bio: str | None = None
    previous_campaigns: list[Any] | None = None


class CreatorProfileRead(CreatorProfileBase):
    """Creator profile response model."""

    id: uuid.UUID
    user_id: uuid.UUID
    portfolio_items: list[Any] | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class CreatorProfileData(CreatorProfileBase):
    """Writable creator profile fields. All are optional."""

    portfolio_items: list[Any] | None = None


class MatchRead(MatchBase):
    """Match response model."""

    id: uuid.UUID
    creator_id: uuid.UUID
    brand_id: uuid.UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime


class ConversationDetail(SQLModel):
    """A conversation seen from one participant's side."""

    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    match_id: uuid.UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime
    match: MatchRead
    other_user: UserRead | None = Field(default=None, alias="otherUser")
    other_profile: BrandProfileRead | CreatorProfileRead | None = Field(
        default=None, alias="otherProfile"
    )


class LikeToggle(SQLModel):
    """Outcome of toggling a like."""

    liked: bool


class PostData(SQLModel):
    """Writable post fields."""

    content: str = Field(min_length=1)
    image_url: str | None = Field(default=None, max_length=2048)


class PostRead(PostBase):
    """Post response model."""

    id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime


class PostDetail(PostRead):
    """A post with its author and the author's profile."""

    user: UserRead | None = None
    profile: BrandProfileRead | CreatorProfileRead | None = None
