"""Client for the Gemini ``generateContent`` REST endpoint."""

import logging
from typing import Any, Dict, Optional

import requests

from backend.conf.config import Config
from backend.src.api.middleware.exceptions import (
    ConfigurationError,
    ShapeError,
    UpstreamError,
)
from backend.src.data_classes import GenerationRequest, GenerationSettings

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = (
    "Network timeout when connecting to AI. Check server's internet or firewall."
)


def _redact(text: str, api_key: str) -> str:
    # Transport errors include the request URL, which carries the key
    return text.replace(api_key, "***")


def default_generation_settings() -> GenerationSettings:
    """Sampling parameters from the configuration."""
    return GenerationSettings(
        temperature=Config.GEMINI_TEMPERATURE,
        top_p=Config.GEMINI_TOP_P,
        top_k=Config.GEMINI_TOP_K,
        max_output_tokens=Config.GEMINI_MAX_TOKENS,
    )


class GeminiClient:
    """Sends single prompts to the Gemini API over HTTPS.

    No retries are made; a request either returns a parsed body or raises a
    classified error.

    Attributes:
        model_name: Gemini model the prompts are sent to
        timeout: Seconds to wait for the API before giving up
        settings: Sampling parameters sent with every prompt
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[GenerationSettings] = None,
    ) -> None:
        self.model_name = model_name or Config.GEMINI_MODEL_NAME
        self.timeout = timeout if timeout is not None else Config.UPSTREAM_TIMEOUT
        self.settings = settings or default_generation_settings()
        self.api_url = Config.GEMINI_API_URL.format(model=self.model_name)

    def generate(self, prompt: str, api_key: Optional[str]) -> Dict[str, Any]:
        """Send a prompt and return the parsed response body.

        Args:
            prompt: Complete prompt text
            api_key: Gemini API key, passed as the ``key`` query parameter

        Returns:
            The decoded JSON response

        Raises:
            ConfigurationError: If no API key is given; no request is made
            UpstreamError: On a non-2xx status or a transport failure
            ShapeError: If the body of a successful response is not a JSON object
        """
        if not api_key:
            raise ConfigurationError(details="GEMINI_API_KEY is not set")

        payload = GenerationRequest(prompt=prompt, settings=self.settings).to_payload()

        try:
            response = requests.post(
                self.api_url,
                params={"key": api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise UpstreamError(
                message=TIMEOUT_MESSAGE, details=_redact(str(e), api_key)
            ) from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(
                details=f"Error calling Gemini API: {_redact(str(e), api_key)}"
            ) from e

        if not response.ok:
            reason = response.reason or "Unknown error"
            logger.error(
                f"Gemini API returned an error status: {response.status_code} {reason}"
            )
            raise UpstreamError(
                message=f"Gemini API error: {reason}. See server logs for details.",
                details=f"Gemini API error body: {response.text}",
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ShapeError(details=f"Gemini API returned invalid JSON: {e}") from e

        if not isinstance(result, dict):
            raise ShapeError(details=f"Gemini API returned {type(result).__name__}")
        return result
