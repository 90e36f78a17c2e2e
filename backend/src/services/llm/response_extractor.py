"""Pulls the answer text out of a Gemini ``generateContent`` response."""

import json
import logging
from typing import Any, Dict, List

from backend.src.api.middleware.exceptions import ShapeError

logger = logging.getLogger(__name__)


def _first(value: Any, field: str) -> Any:
    if not isinstance(value, list) or not value:
        raise ShapeError(details=f"'{field}' is missing or empty")
    return value[0]


def _get(value: Any, key: str) -> Any:
    if not isinstance(value, dict) or key not in value:
        raise ShapeError(details=f"'{key}' is missing")
    return value[key]


def extract_answer(raw: Dict[str, Any]) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a response body.

    Every step is checked, so a missing or malformed link raises ``ShapeError``
    rather than an arbitrary ``KeyError``/``IndexError``/``TypeError``.

    Args:
        raw: Parsed JSON body of a successful Gemini response

    Returns:
        The answer text, unmodified

    Raises:
        ShapeError: If the response cannot be navigated to a text part
    """
    try:
        candidates: List[Any] = _get(raw, "candidates")
        candidate = _first(candidates, "candidates")
        content = _get(candidate, "content")
        part = _first(_get(content, "parts"), "parts")
        text = _get(part, "text")
        if not isinstance(text, str):
            raise ShapeError(details="'text' is not a string")
    except ShapeError as e:
        logger.error(
            f"Unexpected AI response structure ({e.details}): "
            f"{json.dumps(raw, indent=2, default=str)}"
        )
        raise

    return text
