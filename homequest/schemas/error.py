"""
Error response schemas for API documentation and consistent error formatting.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    """Schema for individual field error."""

    field: Optional[str] = Field(None, description="Field that caused the error", examples=["email"])
    message: str = Field(..., description="Human-readable error message")
    type: Optional[str] = Field(None, description="Error type identifier", examples=["value_error"])


class ErrorResponse(BaseModel):
    """Schema for standardized error responses."""

    message: str = Field(..., description="Human-readable error message", examples=["Property not found"])
    code: str = Field(..., description="Error code identifier", examples=["NOT_FOUND"])
    errors: Optional[List[ErrorDetail]] = Field(None, description="Field errors for validation failures")


_DESCRIPTIONS = {
    400: ("Bad Request - validation failed", "VALIDATION_ERROR", "Request validation failed"),
    401: ("Unauthorized - not logged in or bad credentials", "UNAUTHORIZED", "Unauthorized, please log in"),
    403: ("Forbidden - acting on another user's resource", "FORBIDDEN", "You can only update your own profile"),
    404: ("Not Found", "NOT_FOUND", "Property not found"),
    409: ("Conflict - duplicate resource", "CONFLICT", "Username already exists"),
    500: ("Internal Server Error", "INTERNAL_SERVER_ERROR", "An unexpected error occurred. Please try again later."),
}

COMMON_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    code: {
        "description": description,
        "model": ErrorResponse,
        "content": {
            "application/json": {
                "example": {"message": message, "code": error_code}
            }
        }
    }
    for code, (description, error_code, message) in _DESCRIPTIONS.items()
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error response schemas
    """
    return {
        code: COMMON_ERROR_RESPONSES[code]
        for code in status_codes
        if code in COMMON_ERROR_RESPONSES
    }
