"""Flask application for the poetry book chat gateway."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from flask import Flask

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from backend.conf.config import Config
from backend.src.api.core import setup_api
from backend.src.api.middleware.origin import OriginValidator
from backend.src.services import (
    ContentLoadError,
    ContentStore,
    GeminiClient,
    create_chat_gateway,
    create_content_store,
)

# Logging is configured in backend/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    content_store: Optional[ContentStore] = None,
    upstream_client: Optional[GeminiClient] = None,
) -> Flask:
    """Create and configure the Flask application.

    The poetry book is loaded before the app is returned, so the server never
    accepts a connection while the content is missing.

    Args:
        content_store: Store to serve from; loaded from ``Config.CONTENT_PATH`` if None
        upstream_client: Gemini client; created from the configuration if None

    Raises:
        ContentLoadError: If the poetry book cannot be loaded
    """
    logger.info("Starting application setup...")

    app = Flask(__name__, static_folder=None)

    if content_store is None:
        content_store = create_content_store()

    chat_gateway = create_chat_gateway(content_store, upstream_client)
    origin_validator = OriginValidator(Config.ALLOWED_ORIGINS)
    logger.info(f"Allowed origins: {sorted(origin_validator.allowed_origins)}")

    frontend_build_dir: Optional[Path] = None
    if Config.SERVE_FRONTEND:
        frontend_build_dir = Config.FRONTEND_BUILD_DIR

    setup_api(
        app,
        chat_gateway,
        content_store,
        origin_validator,
        frontend_build_dir,
    )

    if Config.GEMINI_API_KEY is None:
        logger.warning("GEMINI_API_KEY is not set; chat requests will fail until it is")

    logger.info("Application setup complete")
    return app


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Run the poetry chat gateway (--port, --content-path, --production)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.FLASK_PORT,
        help=f"Port to listen on (default: {Config.FLASK_PORT})",
    )
    parser.add_argument(
        "--content-path",
        type=Path,
        default=Config.CONTENT_PATH,
        help="Path to the poetry book text file",
    )
    parser.add_argument(
        "--production",
        action="store_true",
        help="Serve the prebuilt frontend bundle",
    )

    args = parser.parse_args()

    Config.FLASK_PORT = args.port
    Config.CONTENT_PATH = args.content_path
    if args.production:
        Config.SERVE_FRONTEND = True

    try:
        app = create_app()
    except ContentLoadError as e:
        logger.error(f"Error reading poetry book: {str(e)}")
        logger.critical("Poetry book could not be loaded. Refusing to start.")
        sys.exit(1)

    logger.info(f"Server listening on port {Config.FLASK_PORT}")
    if not Config.SERVE_FRONTEND:
        logger.info("Ensure your frontend dev server proxies /api requests to this server.")
    app.run(host="0.0.0.0", port=Config.FLASK_PORT)
