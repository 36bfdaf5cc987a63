"""
Pydantic schemas for request/response validation.
"""

from .base import APIModel, MessageResponse

# Authentication schemas
from .auth import (
    LoginRequest,
    LoginResponse,
    AuthStatusResponse
)

# User schemas
from .user import (
    UserCreate,
    UserProfileUpdate,
    UserResponse,
    ProfileUpdateResponse
)

# Property schemas
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyResponse,
    PropertyFilter
)

# Agent, enquiry and saved-property schemas
from .agent import AgentCreate, AgentResponse
from .enquiry import EnquiryCreate, EnquiryResponse
from .saved_property import SavedPropertyCreate, SavedPropertyResponse, SavedStatusResponse

# AI chat schemas
from .ai import ChatRequest, ChatResponse

__all__ = [
    "APIModel",
    "MessageResponse",

    # Authentication
    "LoginRequest",
    "LoginResponse",
    "AuthStatusResponse",

    # User
    "UserCreate",
    "UserProfileUpdate",
    "UserResponse",
    "ProfileUpdateResponse",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyFilter",

    # Agent, enquiry, saved property
    "AgentCreate",
    "AgentResponse",
    "EnquiryCreate",
    "EnquiryResponse",
    "SavedPropertyCreate",
    "SavedPropertyResponse",
    "SavedStatusResponse",

    # AI chat
    "ChatRequest",
    "ChatResponse",
]
