"""
Backend package for the poetry chat gateway.

This package contains the core backend service components including:
- Flask application and API routes
- Reference text loading and prompt construction
- Gemini API integration and response extraction
- Configuration and logging setup
"""

import logging
import os

LOG_FORMAT = "%(levelname)s: %(pathname)s:%(lineno)d %(message)s"
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Configure logging before any submodule creates its logger
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


class RelativePathFilter(logging.Filter):
    """Shorten record paths to be relative to the repository root."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            record.pathname = os.path.relpath(record.pathname, REPO_ROOT)
        except ValueError:
            # Different drive on Windows
            pass
        return True


for _handler in logging.getLogger().handlers:
    _handler.addFilter(RelativePathFilter())
