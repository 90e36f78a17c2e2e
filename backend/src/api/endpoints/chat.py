"""Chat endpoints module.

This module provides the Flask routes for asking questions about the poetry
book.
"""

from typing import Optional, Tuple

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, Field

from backend.src.services import ChatGateway


# Schema definitions
class ChatRequest(BaseModel):
    """Chat request model for validation.

    ``query`` is optional here so that a missing query reaches the gateway and
    gets the same 400 envelope as an empty one.
    """

    query: Optional[str] = Field(
        None, description="User's question about the poetry book"
    )


class ChatResponseModel(BaseModel):
    """Chat response model."""

    response: str = Field(
        ..., description="Generated answer, including any BUTTONS line"
    )


def init_chat_routes(chat_gateway: ChatGateway) -> Blueprint:
    """Initialize chat routes with the provided gateway.

    Args:
        chat_gateway: Orchestrator answering chat requests

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)

    @chat_bp.route("/api/chat", methods=["OPTIONS"])
    def chat_preflight() -> Tuple[str, int]:
        """Answer CORS preflight requests; flask-cors adds the headers."""
        return "", 204

    @chat_bp.route("/api/chat", methods=["POST"], provide_automatic_options=False)
    def chat() -> Tuple[Response, int]:
        """Answer a question using only the poetry book.

        A body that is missing or not JSON is treated as having no query.

        Returns:
            Response with the generated answer
        """
        body = ChatRequest.model_validate(request.get_json(silent=True) or {})
        result = chat_gateway.answer(body.query)
        response = ChatResponseModel(response=result["response"])
        return jsonify(response.model_dump()), 200

    return chat_bp
