"""FastAPI routers and dependencies."""

from collab.api.admin import router as admin_router
from collab.api.contracts import router as contracts_router
from collab.api.conversations import router as conversations_router
from collab.api.deps import get_admin_db, get_app_settings, get_db
from collab.api.messages import router as messages_router
from collab.api.posts import router as posts_router
from collab.api.profiles import router as profiles_router

ROUTERS = [
    admin_router,
    conversations_router,
    messages_router,
    posts_router,
    profiles_router,
    contracts_router,
]

__all__ = [
    "get_admin_db",
    "get_app_settings",
    "get_db",
    "admin_router",
    "contracts_router",
    "conversations_router",
    "messages_router",
    "posts_router",
    "profiles_router",
    "ROUTERS",
]
