"""Middleware package for API request processing.

This module registers middleware functions for the API.
"""

from flask import Flask
from flask_cors import CORS

from backend.src.api.middleware.origin import OriginValidator


def register_middleware(app: Flask, origin_validator: OriginValidator) -> None:
    """Register middleware with the Flask application.

    Args:
        app: Flask application
        origin_validator: Cross-origin policy applied to every request
    """
    from backend.src.api.middleware.error_handler import register_error_handlers
    from backend.src.api.middleware.origin import register_origin_check

    register_origin_check(app, origin_validator)

    # flask-cors only adds response headers; refusal is done by the origin check
    origins = "*" if origin_validator.allow_all else sorted(origin_validator.allowed_origins)
    CORS(app, resources={r"/api/*": {"origins": origins}})

    register_error_handlers(app)
