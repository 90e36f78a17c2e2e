"""Data classes module for upstream requests.

Classes:
    - GenerationSettings: Fixed sampling parameters for the Gemini API
    - GenerationRequest: Prompt plus settings, serializable to the wire payload
"""

from backend.src.data_classes.generation_request import (
    GenerationRequest,
    GenerationSettings,
)

__all__ = ["GenerationRequest", "GenerationSettings"]
