"""
AI chat proxy service.
Forwards a conversation to the Gemini generateContent endpoint and returns the reply text.
"""

from typing import Any, Dict, List, Optional
import httpx
from homequest.utils.exceptions import UpstreamServiceError
import logging

logger = logging.getLogger(__name__)

GENERATION_CONFIG: Dict[str, Any] = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

SAFETY_SETTINGS: List[Dict[str, str]] = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]

EMPTY_REPLY_TEXT = "I apologize, but I couldn't generate a response."
FALLBACK_REPLY_TEXT = (
    "I apologize, but I encountered an error while processing your request. "
    "Please try again later."
)


class AIChatService:
    """
    Thin client for the generative-language API.
    Any transport, status or payload problem surfaces as UpstreamServiceError.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        timeout: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

    @staticmethod
    def build_request_body(messages: List[Any]) -> Dict[str, Any]:
        """Wrap chat messages in a generateContent request body."""
        return {
            "contents": messages,
            "generationConfig": GENERATION_CONFIG,
            "safetySettings": SAFETY_SETTINGS,
        }

    @staticmethod
    def extract_text(data: Dict[str, Any]) -> str:
        """
        Pull the reply text out of a generateContent response.

        Raises:
            UpstreamServiceError: If the response has no candidate content
        """
        try:
            text = data["candidates"][0]["content"]["parts"][0].get("text")
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise UpstreamServiceError(f"Malformed AI response: {e!r}", service="gemini")
        return text or EMPTY_REPLY_TEXT

    async def generate_reply(self, messages: List[Any]) -> str:
        """
        Send the conversation upstream and return the generated text.

        Args:
            messages: Conversation in generateContent `contents` format

        Returns:
            Reply text

        Raises:
            UpstreamServiceError: On network failure, non-2xx status or malformed payload
        """
        body = self.build_request_body(messages)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=body,
                    headers={"Content-Type": "application/json"}
                )
        except httpx.HTTPError as e:
            logger.error(f"AI request failed: {type(e).__name__}: {e}")
            raise UpstreamServiceError("Failed to reach AI service", service="gemini")

        if response.status_code >= 400:
            logger.error(f"AI API returned status code {response.status_code}: {response.text[:500]}")
            raise UpstreamServiceError(
                f"AI API returned status code {response.status_code}",
                service="gemini"
            )

        try:
            data = response.json()
        except ValueError:
            logger.error("AI API returned a non-JSON body")
            raise UpstreamServiceError("AI API returned an invalid body", service="gemini")

        text = self.extract_text(data)
        logger.debug(f"AI reply generated ({len(text)} chars)")
        return text
