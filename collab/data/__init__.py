"""Data-access helpers.

Each helper performs one unit of work against the database and returns a
``Result`` instead of raising, so routes can map failures to responses.
"""

from collab.data.conversations import get_conversation_by_id
from collab.data.messages import mark_as_read, mark_message_as_read
from collab.data.posts import (
    check_post_liked,
    create_post,
    delete_post,
    get_post,
    get_posts_by_user,
    toggle_post_like,
)
from collab.data.profiles import (
    create_brand_profile,
    create_creator_profile,
    get_brand_profile,
    get_creator_profile,
    get_profile_for,
    to_profile_read,
)
from collab.data.users import get_user, list_users, toggle_user_verification

__all__ = [
    "get_conversation_by_id",
    "mark_as_read",
    "mark_message_as_read",
    "check_post_liked",
    "create_post",
    "delete_post",
    "get_post",
    "get_posts_by_user",
    "toggle_post_like",
    "create_brand_profile",
    "create_creator_profile",
    "get_brand_profile",
    "get_creator_profile",
    "get_profile_for",
    "to_profile_read",
    "get_user",
    "list_users",
    "toggle_user_verification",
]
