"""
Utility modules for the HomeQuest Listing API.
"""

from .auth import (
    hash_password,
    verify_password,
    create_session_token,
    read_session_token
)

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    ConflictError,
    BadRequestError,
    InternalServerError,
    InvalidCredentialsError,
    ProfileOwnershipError,
    PropertyNotFoundError,
    DuplicateResourceError,
    UpstreamServiceError
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    # Auth utilities
    "hash_password",
    "verify_password",
    "create_session_token",
    "read_session_token",

    # Exceptions
    "APIException",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "BadRequestError",
    "InternalServerError",
    "InvalidCredentialsError",
    "ProfileOwnershipError",
    "PropertyNotFoundError",
    "DuplicateResourceError",
    "UpstreamServiceError",
]
