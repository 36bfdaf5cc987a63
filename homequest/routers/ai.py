"""
AI assistant endpoint.
Proxies a chat conversation to the generative-language API.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging

from homequest.services.ai_chat import AIChatService, FALLBACK_REPLY_TEXT
from homequest.schemas.ai import ChatRequest, ChatResponse
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import get_ai_chat_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI Assistant"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
    summary="Chat with the property assistant",
    description=(
        "Forward the conversation to the AI model. On any upstream failure a 500 is returned "
        "whose body still carries a displayable fallback reply."
    ),
    responses={
        **get_error_responses(400),
        500: {"description": "AI service failure", "model": ChatResponse}
    }
)
async def chat(
    chat_request: ChatRequest,
    ai_service: AIChatService = Depends(get_ai_chat_service)
):
    """
    Generate an assistant reply.

    Args:
        chat_request: Conversation messages in generateContent format
        ai_service: AI chat client

    Returns:
        Reply content with a success flag
    """
    try:
        content = await ai_service.generate_reply(chat_request.messages)
        return ChatResponse(content=content, success=True)
    except Exception as e:
        logger.error(f"Error in AI chat endpoint: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "Failed to generate AI response",
                "content": FALLBACK_REPLY_TEXT,
                "success": False
            }
        )
