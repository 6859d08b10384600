"""Database models and session management."""

from collab.db.models import (
    BrandProfile,
    Conversation,
    CreatorProfile,
    Match,
    MatchStatus,
    Message,
    Post,
    PostLike,
    User,
    UserRole,
)
from collab.db.session import Database

__all__ = [
    # Models
    "User",
    "UserRole",
    "BrandProfile",
    "CreatorProfile",
    "Match",
    "MatchStatus",
    "Conversation",
    "Message",
    "Post",
    "PostLike",
    # Session
    "Database",
]
