"""
API route handlers for the HomeQuest Listing API.
"""

from .properties import router as properties_router
from .agents import router as agents_router
from .enquiries import router as enquiries_router
from .users import router as users_router
from .auth import router as auth_router
from .saved_properties import router as saved_properties_router
from .ai import router as ai_router

__all__ = [
    "properties_router",
    "agents_router",
    "enquiries_router",
    "users_router",
    "auth_router",
    "saved_properties_router",
    "ai_router"
]
