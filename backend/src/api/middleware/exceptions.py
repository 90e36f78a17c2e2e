"""Custom exception types for the API.

This module defines the error taxonomy of a chat request and the error
response model every failure is rendered with.
"""

from typing import Optional, Tuple

from flask import Response, jsonify
from pydantic import BaseModel, Field


class ErrorResponseModel(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    status_code: int = Field(500, description="HTTP status code")


class APIError(Exception):
    """Base class for all API errors.

    ``details`` is for server-side logs only and is never sent to the client.
    """

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        """Initialize the API error.

        Args:
            message: Custom error message (uses default_message if None)
            details: Internal error details, logged but not returned
        """
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> Tuple[Response, int]:
        """Convert to Flask response."""
        error_model = ErrorResponseModel(error=self.message, status_code=self.status_code)
        return jsonify(error_model.model_dump()), self.status_code


class ValidationError(APIError):
    """Error for a missing or empty query."""

    status_code = 400
    default_message = "Query is required in the request body."


class OriginNotAllowedError(APIError):
    """Error for a cross-origin request from an origin outside the allowlist."""

    status_code = 403
    default_message = "Origin not allowed by CORS policy."


class NotReadyError(APIError):
    """Error for requests arriving before the poetry book is loaded."""

    status_code = 500
    default_message = (
        "Poetry book content not loaded on server. "
        "Please try again in a moment or check server logs."
    )


class ConfigurationError(APIError):
    """Error for a missing Gemini API key."""

    status_code = 500
    default_message = "Server configuration error: API key missing."


class UpstreamError(APIError):
    """Error from the Gemini API or the network path to it."""

    status_code = 500
    default_message = (
        "Backend server error during AI interaction. Please check server logs."
    )


class ShapeError(APIError):
    """Error for a Gemini response that holds no answer text."""

    status_code = 500
    default_message = "Failed to get a valid response from the AI. Unexpected structure."
