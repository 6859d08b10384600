"""Post and like data-access helpers."""

import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from collab.core.errors import OperationFailure
from collab.core.result import Err, Ok, Result
from collab.data.profiles import get_profile_for, to_profile_read
from collab.data.users import get_user
from collab.db.models import LikeToggle, Post, PostData, PostDetail, PostLike, PostRead, UserRead

logger = logging.getLogger(__name__)


async def _find_like(session: AsyncSession, post_id: uuid.UUID, user_id: uuid.UUID) -> PostLike | None:
    result = await session.execute(
        select(PostLike).where(PostLike.post_id == post_id, PostLike.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def get_post(session: AsyncSession, post_id: uuid.UUID) -> Result[Post]:
    """Fetch a post by id."""
    try:
        post = await session.get(Post, post_id)
        if post is None:
            logger.warning(f"Post not found: {post_id}")
            return Err.of("Failed to fetch post: post not found", OperationFailure.NOT_FOUND)
        return Ok(post)

    except SQLAlchemyError as e:
        logger.error(f"Error fetching post: {e}", exc_info=True)
        return Err.of(f"Failed to fetch post: {e}")


async def create_post(session: AsyncSession, user_id: uuid.UUID, post_data: PostData) -> Result[Post]:
    """Publish a post for ``user_id``."""
    try:
        post = Post(user_id=user_id, **post_data.model_dump())
        session.add(post)
        await session.commit()
        await session.refresh(post)

        logger.info(f"Created post {post.id} for user {user_id}")
        return Ok(post)

    except SQLAlchemyError as e:
        logger.error(f"Error creating post: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to create post: {e}")


async def get_posts_by_user(
    session: AsyncSession,
    user_id: uuid.UUID,
    limit: int = 20,
    offset: int = 0,
) -> Result[list[PostDetail]]:
    """List a user's posts, newest first, each with its author and profile.

    Args:
        session: Database session.
        user_id: Author whose posts are listed.
        limit: Maximum number of posts.
        offset: Number of posts to skip.
    """
    try:
        result = await session.execute(
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        posts = list(result.scalars().all())
        if not posts:
            return Ok([])

        # Every post shares one author
        author = await get_user(session, user_id)
        profile = to_profile_read(await get_profile_for(session, author))
        author_read = UserRead.model_validate(author) if author else None

        return Ok(
            [
                PostDetail(**PostRead.model_validate(post).model_dump(), user=author_read, profile=profile)
                for post in posts
            ]
        )

    except SQLAlchemyError as e:
        logger.error(f"Error fetching posts: {e}", exc_info=True)
        return Err.of(f"Failed to fetch posts: {e}")


async def delete_post(session: AsyncSession, post_id: uuid.UUID, user_id: uuid.UUID) -> Result[None]:
    """Delete a post. Only its author may do so."""
    found = await get_post(session, post_id)
    if isinstance(found, Err):
        return found

    post = found.value
    if post.user_id != user_id:
        logger.warning(f"User {user_id} attempted to delete post {post_id} owned by {post.user_id}")
        return Err.of(
            "Unauthorized: You can only delete your own posts",
            OperationFailure.FORBIDDEN,
        )

    try:
        await session.delete(post)
        await session.commit()

        logger.info(f"Deleted post: {post_id}")
        return Ok(None)

    except SQLAlchemyError as e:
        logger.error(f"Error deleting post: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to delete post: {e}")


async def check_post_liked(session: AsyncSession, post_id: uuid.UUID, user_id: uuid.UUID) -> Result[bool]:
    """Whether ``user_id`` currently likes the post."""
    try:
        return Ok(await _find_like(session, post_id, user_id) is not None)

    except SQLAlchemyError as e:
        logger.error(f"Error checking post like: {e}", exc_info=True)
        return Err.of(f"Failed to check like status: {e}")


async def toggle_post_like(
    session: AsyncSession,
    post_id: uuid.UUID,
    user_id: uuid.UUID,
) -> Result[LikeToggle]:
    """Like the post if the user has not yet, otherwise remove the like.

    ``posts.likes_count`` is adjusted in the same transaction with an
    in-database increment, so concurrent toggles on one post do not lose
    updates.
    """
    existing: PostLike | None = None
    try:
        post = await session.get(Post, post_id)
        if post is None:
            logger.warning(f"Post not found for like: {post_id}")
            return Err.of("Failed to toggle like: post not found", OperationFailure.NOT_FOUND)

        existing = await _find_like(session, post_id, user_id)

        if existing is not None:
            await session.delete(existing)
            counter = (
                update(Post)
                .where(Post.id == post_id, Post.likes_count > 0)
                .values(likes_count=Post.likes_count - 1)
            )
            liked = False
        else:
            session.add(PostLike(post_id=post_id, user_id=user_id))
            counter = (
                update(Post)
                .where(Post.id == post_id)
                .values(likes_count=Post.likes_count + 1)
            )
            liked = True

        await session.execute(counter.execution_options(synchronize_session=False))
        await session.commit()

        logger.info(f"User {user_id} {'liked' if liked else 'unliked'} post {post_id}")
        return Ok(LikeToggle(liked=liked))

    except SQLAlchemyError as e:
        logger.error(f"Error toggling post like: {e}", exc_info=True)
        await session.rollback()
        return Err.of(f"Failed to {'unlike' if existing else 'like'} post: {e}")
