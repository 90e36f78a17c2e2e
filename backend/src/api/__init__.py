"""API package for the backend service.

This package contains the API endpoints, middleware and error types for the
backend service. Use :func:`backend.src.api.core.setup_api` to wire them into
a Flask application.
"""
