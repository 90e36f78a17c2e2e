"""Error handling middleware for API requests.

This module converts every failure into the JSON error envelope.
"""

import logging
import traceback
from typing import Tuple

from flask import Flask, Response, jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from backend.src.api.middleware.exceptions import APIError, ErrorResponseModel

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers with the Flask application.

    Args:
        app: Flask application
    """

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_validation_error(error: PydanticValidationError) -> Tuple[Response, int]:  # type: ignore
        """Handle Pydantic validation errors."""
        logger.warning(f"Validation error: {error}")

        response = ErrorResponseModel(error="Invalid request data", status_code=400)
        return jsonify(response.model_dump()), 400

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError) -> Tuple[Response, int]:  # type: ignore
        """Handle custom API errors.

        Args:
            error: Custom API error

        Returns:
            JSON response with the public error message
        """
        logger.error(f"API error ({error.__class__.__name__}): {error.message}")
        if error.details:
            logger.error(f"Error details: {error.details}")

        return error.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> Tuple[Response, int]:  # type: ignore
        """Render werkzeug HTTP errors (404, 405, ...) in the same envelope."""
        status_code = error.code or 500
        response = ErrorResponseModel(
            error=error.name or "HTTP error", status_code=status_code
        )
        return jsonify(response.model_dump()), status_code

    @app.errorhandler(Exception)
    def handle_exception(error: Exception) -> Tuple[Response, int]:  # type: ignore
        """Handle uncaught exceptions.

        Args:
            error: Exception that was raised

        Returns:
            JSON response with a generic error message
        """
        logger.error(f"Unhandled exception: {str(error)}")
        logger.error(traceback.format_exc())

        response = ErrorResponseModel(error="Internal server error", status_code=500)
        return jsonify(response.model_dump()), 500
