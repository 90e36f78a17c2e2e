"""Request body sent to the Gemini ``generateContent`` endpoint."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class GenerationSettings:
    """Sampling parameters for a generation request.

    Attributes:
        temperature: Sampling temperature
        top_p: Nucleus sampling threshold
        top_k: Number of candidate tokens considered per step
        max_output_tokens: Upper bound on the answer length
    """

    temperature: float
    top_p: float
    top_k: int
    max_output_tokens: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "topP": self.top_p,
            "topK": self.top_k,
            "maxOutputTokens": self.max_output_tokens,
        }


@dataclass(frozen=True)
class GenerationRequest:
    """A single-turn user prompt with its generation settings."""

    prompt: str
    settings: GenerationSettings

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by the Gemini API."""
        return {
            "contents": [{"role": "user", "parts": [{"text": self.prompt}]}],
            "generationConfig": self.settings.to_dict(),
        }
