"""
Pydantic schemas for the AI chat proxy.
Messages are forwarded verbatim as generative-language `contents`.
"""

from pydantic import Field, field_validator
from typing import Any, List, Optional
from homequest.schemas.base import APIModel


class ChatRequest(APIModel):
    """Conversation to forward, e.g. [{"role": "user", "parts": [{"text": "..."}]}]."""

    messages: List[Any] = Field(..., description="Chat messages in generateContent format")
    # Accepted for client compatibility, not forwarded
    enhanced_prompt: Optional[Any] = None

    @field_validator('messages', mode='before')
    @classmethod
    def validate_messages(cls, v):
        if not isinstance(v, list):
            raise ValueError("Invalid chat messages format")
        return v


class ChatResponse(APIModel):
    """Generated reply; `success` is False when the fallback text was used."""

    content: str
    success: bool = True
    message: Optional[str] = None
