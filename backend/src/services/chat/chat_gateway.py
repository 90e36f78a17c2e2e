"""Orchestrates a single chat request from query to answer text."""

import logging
from typing import Callable, Dict, Optional

from backend.src.api.middleware.exceptions import (
    ConfigurationError,
    NotReadyError,
    ValidationError,
)
from backend.src.services.content import ContentStore
from backend.src.services.llm import GeminiClient, extract_answer
from backend.src.services.prompting import build_prompt

logger = logging.getLogger(__name__)


class ChatGateway:
    """Answers questions about the poetry book using the Gemini API.

    Each call runs validate, readiness check, configuration check, prompt
    building, the upstream call and answer extraction in that order, and stops
    at the first failure. Nothing is retried and nothing is kept between calls.

    Attributes:
        content_store: Loaded reference text
        upstream_client: Client used to reach the Gemini API
    """

    def __init__(
        self,
        content_store: ContentStore,
        upstream_client: GeminiClient,
        api_key_provider: Callable[[], Optional[str]],
    ) -> None:
        """Initialize the gateway.

        Args:
            content_store: Store holding the poetry book
            upstream_client: Gemini client
            api_key_provider: Returns the current API key, or None when unset
        """
        self.content_store = content_store
        self.upstream_client = upstream_client
        self._api_key_provider = api_key_provider

    def answer(self, query: Optional[str]) -> Dict[str, str]:
        """Answer a user query.

        Args:
            query: The user's question

        Returns:
            ``{"response": answer_text}`` with the text exactly as generated,
            including any trailing ``BUTTONS:`` line

        Raises:
            ValidationError: If the query is missing or blank
            NotReadyError: If the poetry book is not loaded
            ConfigurationError: If no API key is configured
            UpstreamError: If the Gemini API call fails
            ShapeError: If the Gemini response holds no answer text
        """
        if not query or not query.strip():
            raise ValidationError()

        if not self.content_store.is_ready:
            raise NotReadyError(
                details="Chat request received before poetry book was loaded"
            )

        api_key = self._api_key_provider()
        if not api_key:
            raise ConfigurationError(
                details="GEMINI_API_KEY is not set in environment variables"
            )

        prompt = build_prompt(self.content_store.text, query)
        logger.info(
            f"Sending query to Gemini | query_length={len(query)} "
            f"| prompt_length={len(prompt)}"
        )

        raw = self.upstream_client.generate(prompt, api_key)
        answer = extract_answer(raw)

        logger.info(f"Gemini answer received | answer_length={len(answer)}")
        return {"response": answer}
