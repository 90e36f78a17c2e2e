"""
Core package for the backend service.

This package contains the main application logic and components including:
- Reference text storage and prompt construction
- Gemini API client and response extraction
- API routes, middleware and error types
"""
