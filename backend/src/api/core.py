"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging
from pathlib import Path
from typing import Optional

from flask import Flask

from backend.src.api.endpoints import register_endpoints
from backend.src.api.middleware import register_middleware
from backend.src.api.middleware.origin import OriginValidator
from backend.src.services import ChatGateway, ContentStore

logger = logging.getLogger(__name__)


def setup_api(
    app: Flask,
    chat_gateway: ChatGateway,
    content_store: ContentStore,
    origin_validator: OriginValidator,
    frontend_build_dir: Optional[Path] = None,
) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        chat_gateway: Orchestrator answering chat requests
        content_store: Store holding the poetry book
        origin_validator: Cross-origin policy applied to every request
        frontend_build_dir: Frontend build to serve, or None in development
    """
    register_middleware(app, origin_validator)

    register_endpoints(app, chat_gateway, content_store, frontend_build_dir)
