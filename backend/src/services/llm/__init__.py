"""LLM service package."""

from .gemini_client import GeminiClient, default_generation_settings
from .response_extractor import extract_answer

__all__ = ["GeminiClient", "default_generation_settings", "extract_answer"]
