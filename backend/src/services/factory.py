"""Service factory module for centralized service instantiation.

This module provides factory methods for creating service instances,
keeping service initialization logic in one place.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from backend.conf.config import Config
from backend.src.services.chat import ChatGateway
from backend.src.services.content import ContentStore
from backend.src.services.llm import GeminiClient

logger = logging.getLogger(__name__)


def create_content_store(path: Optional[Union[str, Path]] = None) -> ContentStore:
    """Create a ContentStore and load the poetry book into it.

    Args:
        path: Location of the text file, defaults to ``Config.CONTENT_PATH``

    Returns:
        A loaded ContentStore

    Raises:
        ContentLoadError: If the file cannot be read
    """
    store = ContentStore(path or Config.CONTENT_PATH)
    store.load()
    return store


def create_upstream_client() -> GeminiClient:
    """Create a Gemini client from the configuration."""
    client = GeminiClient()
    logger.info(f"Initialized Gemini client with model: {client.model_name}")
    return client


def create_chat_gateway(
    content_store: ContentStore, upstream_client: Optional[GeminiClient] = None
) -> ChatGateway:
    """Create the chat gateway.

    The API key is read from ``Config`` on every request, so a key set after
    startup is picked up without rebuilding the gateway.

    Args:
        content_store: Store holding the poetry book
        upstream_client: Gemini client, created from the configuration if None

    Returns:
        Configured ChatGateway instance
    """
    return ChatGateway(
        content_store=content_store,
        upstream_client=upstream_client or create_upstream_client(),
        api_key_provider=lambda: Config.GEMINI_API_KEY,
    )
