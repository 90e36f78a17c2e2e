"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .chat import ChatGateway
from .content import ContentLoadError, ContentStore
from .factory import create_chat_gateway, create_content_store, create_upstream_client
from .llm import GeminiClient

__all__ = [
    "ChatGateway",
    "ContentStore",
    "ContentLoadError",
    "GeminiClient",
    # Factory Functions
    "create_chat_gateway",
    "create_content_store",
    "create_upstream_client",
]
