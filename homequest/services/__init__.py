"""
Service layer for business logic implementation.
Contains services for authentication, the AI chat proxy, and error handling.
"""

from .auth import AuthService
from .ai_chat import AIChatService
from .error_handler import ErrorHandlerService

__all__ = [
    "AuthService",
    "AIChatService",
    "ErrorHandlerService"
]
