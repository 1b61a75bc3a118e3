"""
Gemini API client.

Thin async wrapper around ``google.genai.Client``. One instance is meant
to be built by the caller and shared by the quiz and study guide
generators; it holds no per-request state.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from google import genai
from loguru import logger

from .config import Settings, get_settings


class GeminiClient:
    """Async client for structured and free-text Gemini requests."""

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key (defaults to settings / environment)
            model_name: Model to call (defaults to ``settings.ai_model``)
            settings: Settings override, mainly for tests
        """
        settings = settings or get_settings()
        self.api_key = api_key or settings.gemini_api_key
        self.model_name = model_name or settings.ai_model
        self._client: genai.Client | None = None

    @property
    def client(self) -> genai.Client:
        """Lazy-load the SDK client."""
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
            logger.debug(f"Gemini client initialized for model {self.model_name}")
        return self._client

    async def generate_json(self, prompt: str, config: dict[str, Any]) -> str | None:
        """
        Send a schema-constrained request.

        Args:
            prompt: Instruction text
            config: Generation config carrying ``response_mime_type`` and
                ``response_schema``

        Returns:
            The serialized JSON payload, or None if the model returned no text
        """
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=config,
        )
        return response.text

    async def generate_text(self, prompt: str) -> str | None:
        """Send a free-text request and return the response text."""
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
        )
        return response.text


@lru_cache(maxsize=1)
def get_default_client() -> GeminiClient:
    """Get the process-wide client built from settings."""
    return GeminiClient()
