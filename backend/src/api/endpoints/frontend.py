"""Serves the prebuilt frontend bundle in production mode."""

import logging
from pathlib import Path

from flask import Blueprint, Response, abort, send_from_directory

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def init_frontend_routes(build_dir: Path) -> Blueprint:
    """Serve files from ``build_dir`` and fall back to its index document.

    Paths under ``api/`` are never served from here so unknown API routes
    still answer 404.

    Args:
        build_dir: Directory holding the frontend build output

    Returns:
        Blueprint: Flask blueprint with the static routes
    """
    frontend_bp = Blueprint("frontend", __name__)
    build_dir = Path(build_dir).resolve()
    logger.info(f"Serving frontend from {build_dir}")

    @frontend_bp.route("/", defaults={"path": ""}, methods=["GET"])
    @frontend_bp.route("/<path:path>", methods=["GET"])
    def serve_frontend(path: str) -> Response:
        if path == "api" or path.startswith("api/"):
            abort(404)
        if path and (build_dir / path).is_file():
            return send_from_directory(build_dir, path)
        return send_from_directory(build_dir, INDEX_FILE)

    return frontend_bp
