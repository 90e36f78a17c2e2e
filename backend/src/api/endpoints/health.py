"""Health check endpoint."""

from typing import Tuple

from flask import Blueprint, Response, jsonify
from pydantic import BaseModel, Field

from backend.src.services import ContentStore


class HealthResponseModel(BaseModel):
    """Health response model."""

    status: str = Field("ok", description="Always 'ok' while the process serves")
    poetryLoaded: bool = Field(..., description="Whether the poetry book is loaded")


def init_health_routes(content_store: ContentStore) -> Blueprint:
    """Initialize the health route reporting content readiness."""
    health_bp = Blueprint("health", __name__)

    @health_bp.route("/api/health", methods=["GET"])
    def health() -> Tuple[Response, int]:
        response = HealthResponseModel(poetryLoaded=content_store.is_ready)
        return jsonify(response.model_dump()), 200

    return health_bp
