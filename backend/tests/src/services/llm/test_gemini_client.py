"""Unit tests for the GeminiClient class."""

import unittest
from unittest.mock import Mock, patch

import requests

from backend.src.api.middleware.exceptions import (
    ConfigurationError,
    ShapeError,
    UpstreamError,
)
from backend.src.data_classes import GenerationSettings
from backend.src.services.llm import GeminiClient, default_generation_settings


class TestGeminiClient(unittest.TestCase):
    """Test cases for GeminiClient.generate."""

    def setUp(self) -> None:
        self.client = GeminiClient(model_name="gemini-2.0-flash", timeout=12.5)
        self.success_body = {
            "candidates": [{"content": {"parts": [{"text": "An answer"}]}}]
        }

        patcher = patch("backend.src.services.llm.gemini_client.requests.post")
        self.mock_post = patcher.start()
        self.addCleanup(patcher.stop)

    def _mock_response(self, status_code: int = 200, reason: str = "OK") -> Mock:
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.reason = reason
        response.text = "upstream body"
        response.json.return_value = self.success_body
        return response

    def test_default_settings_are_fixed(self) -> None:
        self.assertEqual(
            default_generation_settings(),
            GenerationSettings(
                temperature=0.5, top_p=0.9, top_k=40, max_output_tokens=1000
            ),
        )

    def test_missing_api_key_makes_no_request(self) -> None:
        for api_key in (None, ""):
            with self.subTest(api_key=api_key):
                with self.assertRaises(ConfigurationError):
                    self.client.generate("prompt", api_key)

        self.mock_post.assert_not_called()

    def test_request_format(self) -> None:
        """The prompt, settings, key and timeout are sent as expected."""
        self.mock_post.return_value = self._mock_response()

        result = self.client.generate("The prompt", "secret-key")

        self.assertEqual(result, self.success_body)
        self.mock_post.assert_called_once()
        args, kwargs = self.mock_post.call_args
        self.assertEqual(
            args[0],
            "https://generativelanguage.googleapis.com/v1beta/models/"
            "gemini-2.0-flash:generateContent",
        )
        self.assertEqual(kwargs["params"], {"key": "secret-key"})
        self.assertEqual(kwargs["timeout"], 12.5)
        self.assertEqual(
            kwargs["json"],
            {
                "contents": [{"role": "user", "parts": [{"text": "The prompt"}]}],
                "generationConfig": {
                    "temperature": 0.5,
                    "topP": 0.9,
                    "topK": 40,
                    "maxOutputTokens": 1000,
                },
            },
        )

    def test_error_status_raises_upstream_error(self) -> None:
        """Status text reaches the message; the body stays in the details."""
        self.mock_post.return_value = self._mock_response(429, "Too Many Requests")

        with self.assertRaises(UpstreamError) as ctx:
            self.client.generate("prompt", "key")

        self.assertEqual(
            ctx.exception.message,
            "Gemini API error: Too Many Requests. See server logs for details.",
        )
        self.assertNotIn("upstream body", ctx.exception.message)
        self.assertIn("upstream body", ctx.exception.details)

    def test_error_status_without_reason(self) -> None:
        self.mock_post.return_value = self._mock_response(500, "")

        with self.assertRaises(UpstreamError) as ctx:
            self.client.generate("prompt", "key")

        self.assertIn("Unknown error", ctx.exception.message)

    def test_timeout_raises_upstream_error(self) -> None:
        self.mock_post.side_effect = requests.exceptions.ConnectTimeout("timed out")

        with self.assertRaises(UpstreamError) as ctx:
            self.client.generate("prompt", "key")

        self.assertIn("Network timeout", ctx.exception.message)

    def test_connection_error_raises_upstream_error(self) -> None:
        self.mock_post.side_effect = requests.exceptions.ConnectionError("refused")

        with self.assertRaises(UpstreamError) as ctx:
            self.client.generate("prompt", "key")

        self.assertEqual(
            ctx.exception.message,
            "Backend server error during AI interaction. Please check server logs.",
        )
        self.assertIn("refused", ctx.exception.details)

    def test_transport_error_details_hide_api_key(self) -> None:
        self.mock_post.side_effect = requests.exceptions.ConnectionError(
            "Max retries exceeded with url: /v1beta/models/x:generateContent?key=secret-key"
        )

        with self.assertRaises(UpstreamError) as ctx:
            self.client.generate("prompt", "secret-key")

        self.assertNotIn("secret-key", ctx.exception.details)

    def test_invalid_json_raises_shape_error(self) -> None:
        response = self._mock_response()
        response.json.side_effect = ValueError("Expecting value")
        self.mock_post.return_value = response

        with self.assertRaises(ShapeError):
            self.client.generate("prompt", "key")

    def test_non_object_json_raises_shape_error(self) -> None:
        response = self._mock_response()
        response.json.return_value = ["not", "an", "object"]
        self.mock_post.return_value = response

        with self.assertRaises(ShapeError):
            self.client.generate("prompt", "key")


if __name__ == "__main__":
    unittest.main()
