"""Post API routes.

Publishing and listing posts, like toggling, like status, and deletion.
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from collab.api.deps import get_db
from collab.api.handlers import (
    build_model,
    delegate,
    parse_path_id,
    require_text,
    require_user_id,
    require_uuid,
)
from collab.api.schemas import (
    ErrorResponse,
    LikeStatusResponse,
    PostCreateRequest,
    PostListResponse,
    PostResponse,
    SuccessResponse,
    UserIdBody,
)
from collab.data.posts import (
    check_post_liked,
    create_post,
    delete_post,
    get_posts_by_user,
    toggle_post_like,
)
from collab.db.models import LikeToggle, PostData, PostRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


POST_FIELDS_REQUIRED = "User ID and content are required"


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def publish_post(
    payload: PostCreateRequest | None = None,
    session: AsyncSession = Depends(get_db),
) -> PostResponse:
    """Publish a post on behalf of ``userId``.

    Args:
        payload: ``userId``, ``content``, and an optional ``imageUrl``.
        session: Database session.

    Returns:
        The stored post.
    """
    payload = payload or PostCreateRequest()
    author_id = require_uuid(payload.user_id, missing=POST_FIELDS_REQUIRED, label="user")
    content = require_text(payload.content, POST_FIELDS_REQUIRED)

    post_data = build_model(PostData, content=content, image_url=payload.image_url or None)

    logger.info(f"Publishing post for user {author_id}")

    post = await delegate(create_post(session, author_id, post_data), "Failed to create post")
    return PostResponse(post=PostRead.model_validate(post))


@router.get("", response_model=PostListResponse)
async def list_posts(
    user_id: str | None = Query(default=None, alias="userId"),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_db),
) -> PostListResponse:
    """List a user's posts, newest first, with author and profile."""
    author_id = require_user_id(user_id)

    posts = await delegate(
        get_posts_by_user(session, author_id, limit, offset),
        "Failed to fetch posts",
    )
    return PostListResponse(posts=posts)


@router.get("/{post_id}/check-like", response_model=LikeStatusResponse)
async def check_like(
    post_id: str,
    user_id: str | None = Query(default=None, alias="userId"),
    session: AsyncSession = Depends(get_db),
) -> LikeStatusResponse:
    """Report whether the user likes the post."""
    liker_id = require_user_id(user_id)
    post_uuid = parse_path_id(post_id, "post")

    is_liked = await delegate(
        check_post_liked(session, post_uuid, liker_id),
        "Failed to check like status",
    )
    return LikeStatusResponse(is_liked=is_liked)


@router.post("/{post_id}/like", response_model=LikeToggle)
async def toggle_like(
    post_id: str,
    payload: UserIdBody | None = None,
    session: AsyncSession = Depends(get_db),
) -> LikeToggle:
    """Like the post, or remove the like if the user already liked it.

    Returns:
        ``{"liked": true}`` after liking, ``{"liked": false}`` after unliking.
    """
    liker_id = require_user_id(payload.user_id if payload else None)
    post_uuid = parse_path_id(post_id, "post")

    logger.info(f"Toggling like on post {post_uuid} for user {liker_id}")

    return await delegate(toggle_post_like(session, post_uuid, liker_id), "Failed to toggle like")


@router.delete("/{post_id}", response_model=SuccessResponse)
async def remove_post(
    post_id: str,
    payload: UserIdBody | None = None,
    session: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete a post on behalf of its author."""
    author_id = require_user_id(payload.user_id if payload else None)
    post_uuid = parse_path_id(post_id, "post")

    logger.info(f"Deleting post {post_uuid} for user {author_id}")

    await delegate(delete_post(session, post_uuid, author_id), "Failed to delete post")
    return SuccessResponse()
