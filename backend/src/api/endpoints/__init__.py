"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from pathlib import Path
from typing import Optional

from flask import Flask

from backend.src.api.endpoints.chat import init_chat_routes
from backend.src.api.endpoints.frontend import init_frontend_routes
from backend.src.api.endpoints.health import init_health_routes
from backend.src.services import ChatGateway, ContentStore


def register_endpoints(
    app: Flask,
    chat_gateway: ChatGateway,
    content_store: ContentStore,
    frontend_build_dir: Optional[Path] = None,
) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        chat_gateway: Orchestrator answering chat requests
        content_store: Store reported on by the health endpoint
        frontend_build_dir: Frontend build to serve, or None to serve no frontend
    """
    app.register_blueprint(init_chat_routes(chat_gateway))
    app.register_blueprint(init_health_routes(content_store))

    # Registered last so the catch-all never shadows an API route
    if frontend_build_dir is not None:
        app.register_blueprint(init_frontend_routes(frontend_build_dir))
