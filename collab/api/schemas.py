"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.

Request bodies declare their required fields as ``Any`` so that a missing
or wrongly typed value reaches the route, which answers with its own
message instead of a generic validation error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from collab.db.models import (
    BrandProfileRead,
    ConversationDetail,
    CreatorProfileRead,
    PostDetail,
    PostRead,
    UserRead,
)


class RequestBody(BaseModel):
    """Base for request bodies: camelCase or snake_case keys, extras ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# Shared Schemas
# =============================================================================


class UserIdBody(RequestBody):
    """Body carrying only the acting user's id."""

    user_id: Any = Field(default=None, alias="userId")


class SuccessResponse(BaseModel):
    """Acknowledgement for operations with no result."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(description="Error message")


# =============================================================================
# Admin Schemas
# =============================================================================


class VerifyUserRequest(RequestBody):
    """Request to set a user's verified flag."""

    user_id: Any = Field(default=None, alias="userId")
    verified: Any = None


class UserResponse(BaseModel):
    """Envelope for a single user."""

    user: UserRead


class UserListResponse(BaseModel):
    """Envelope for a list of users."""

    users: list[UserRead]


# =============================================================================
# Conversation & Post Schemas
# =============================================================================


class ConversationResponse(BaseModel):
    """Envelope for a conversation."""

    conversation: ConversationDetail


class PostCreateRequest(RequestBody):
    """Request to publish a post."""

    user_id: Any = Field(default=None, alias="userId")
    content: Any = None
    image_url: str | None = Field(default=None, alias="imageUrl")


class PostResponse(BaseModel):
    """Envelope for a single post."""

    post: PostRead


class PostListResponse(BaseModel):
    """Envelope for a page of posts."""

    posts: list[PostDetail]


class LikeStatusResponse(BaseModel):
    """Whether the user likes the post."""

    model_config = ConfigDict(populate_by_name=True)

    is_liked: bool = Field(alias="isLiked")


# =============================================================================
# Profile Schemas
# =============================================================================


class BrandProfileRequest(RequestBody):
    """Request to create (or refresh) a brand profile."""

    user_id: Any = Field(default=None, alias="userId")
    company_name: Any = None
    vertical: str | None = None
    ad_spend_range: str | None = None
    bio: str | None = None
    previous_campaigns: list[Any] | None = None


class BrandProfileResponse(BaseModel):
    """Envelope for a brand profile."""

    profile: BrandProfileRead


class CreatorProfileRequest(RequestBody):
    """Request to create (or refresh) a creator profile."""

    user_id: Any = Field(default=None, alias="userId")
    instagram_handle: str | None = None
    tiktok_handle: str | None = None
    follower_count_ig: int | None = None
    follower_count_tiktok: int | None = None
    bio: str | None = None
    portfolio_items: list[Any] | None = None


class CreatorProfileResponse(BaseModel):
    """Envelope for a creator profile."""

    profile: CreatorProfileRead


# =============================================================================
# Contract Schemas
# =============================================================================


class NDARequest(RequestBody):
    """Request to generate an NDA."""

    brand_name: Any = Field(default=None, alias="brandName")
    creator_name: Any = Field(default=None, alias="creatorName")
    term: Any = None

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "brandName": "Acme Skincare",
                "creatorName": "Ana Silva",
                "term": "2 years",
            }
        },
    )


class NDAResponse(BaseModel):
    """Generated NDA text."""

    nda: str
