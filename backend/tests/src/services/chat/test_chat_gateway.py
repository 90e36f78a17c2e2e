"""Unit tests for the ChatGateway class."""

import unittest
from typing import Optional
from unittest.mock import Mock

from backend.src.api.middleware.exceptions import (
    ConfigurationError,
    NotReadyError,
    ShapeError,
    UpstreamError,
    ValidationError,
)
from backend.src.services.chat import ChatGateway
from backend.src.services.content import ContentStore
from backend.src.services.llm import GeminiClient


class TestChatGateway(unittest.TestCase):
    """Test cases for ChatGateway.answer.

    Each step of the pipeline is checked in order, with the upstream client
    replaced by a mock.
    """

    def setUp(self) -> None:
        self.content_store = ContentStore.from_text("## Poem 1\nDawn breaks.")
        self.mock_client = Mock(spec=GeminiClient)
        self.mock_client.generate.return_value = {
            "candidates": [
                {"content": {"parts": [{"text": "Example answer. BUTTONS: Poem 1, Theme A"}]}}
            ]
        }
        self.api_key: Optional[str] = "test-key"

        self.gateway = ChatGateway(
            content_store=self.content_store,
            upstream_client=self.mock_client,
            api_key_provider=lambda: self.api_key,
        )

    def test_answer_success(self) -> None:
        """A valid query returns the upstream text unchanged."""
        result = self.gateway.answer("Tell me about Poem 1")

        self.assertEqual(result, {"response": "Example answer. BUTTONS: Poem 1, Theme A"})
        self.mock_client.generate.assert_called_once()
        prompt, api_key = self.mock_client.generate.call_args[0]
        self.assertIn("## Poem 1\nDawn breaks.", prompt)
        self.assertTrue(prompt.endswith('"Tell me about Poem 1"'))
        self.assertEqual(api_key, "test-key")

    def test_missing_or_blank_query(self) -> None:
        for query in (None, "", "   \n"):
            with self.subTest(query=query):
                with self.assertRaises(ValidationError):
                    self.gateway.answer(query)

        self.mock_client.generate.assert_not_called()

    def test_validation_runs_before_readiness(self) -> None:
        """An empty query is a ValidationError even when content is not loaded."""
        self.gateway.content_store = ContentStore("unused.txt")

        with self.assertRaises(ValidationError):
            self.gateway.answer("")

    def test_content_not_ready(self) -> None:
        self.gateway.content_store = ContentStore("unused.txt")

        with self.assertRaises(NotReadyError):
            self.gateway.answer("What themes appear?")

        self.mock_client.generate.assert_not_called()

    def test_missing_api_key_skips_upstream(self) -> None:
        for api_key in (None, ""):
            with self.subTest(api_key=api_key):
                self.api_key = api_key
                with self.assertRaises(ConfigurationError):
                    self.gateway.answer("What themes appear?")

        self.mock_client.generate.assert_not_called()

    def test_upstream_error_propagates(self) -> None:
        self.mock_client.generate.side_effect = UpstreamError(details="503")

        with self.assertRaises(UpstreamError):
            self.gateway.answer("What themes appear?")

    def test_missing_candidates_is_shape_error(self) -> None:
        self.mock_client.generate.return_value = {"promptFeedback": {"blockReason": "OTHER"}}

        with self.assertRaises(ShapeError):
            self.gateway.answer("What themes appear?")


if __name__ == "__main__":
    unittest.main()
