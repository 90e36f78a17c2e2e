"""Chat orchestration package."""

from .chat_gateway import ChatGateway

__all__ = ["ChatGateway"]
