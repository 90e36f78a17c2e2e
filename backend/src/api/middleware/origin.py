"""Cross-origin access policy.

Requests without an ``Origin`` header (same-origin pages, curl, server to
server calls) are always accepted. Any other origin must match an allowlist
entry exactly. A single ``*`` entry allows every origin.
"""

import logging
from typing import FrozenSet, Iterable, Optional

from flask import Flask, request

from backend.src.api.middleware.exceptions import OriginNotAllowedError

logger = logging.getLogger(__name__)

ALLOW_ALL = "*"


class OriginValidator:
    """Checks request origins against a fixed allowlist."""

    def __init__(self, allowed_origins: Iterable[str]) -> None:
        self.allowed_origins: FrozenSet[str] = frozenset(allowed_origins)
        self.allow_all: bool = ALLOW_ALL in self.allowed_origins

    def is_allowed(self, origin: Optional[str]) -> bool:
        """Return whether a request with this ``Origin`` header may proceed.

        Matching is exact and case-sensitive; no wildcard or subdomain matching
        is done apart from the explicit allow-all entry.
        """
        if not origin:
            return True
        if self.allow_all:
            return True
        return origin in self.allowed_origins


def register_origin_check(app: Flask, validator: OriginValidator) -> None:
    """Reject disallowed origins before any endpoint reads the request.

    Args:
        app: Flask application
        validator: Policy to apply to every request
    """

    @app.before_request
    def check_origin() -> None:
        origin = request.headers.get("Origin")
        if not validator.is_allowed(origin):
            logger.warning(
                f"Rejected {request.method} {request.path} from origin {origin!r}"
            )
            raise OriginNotAllowedError()
