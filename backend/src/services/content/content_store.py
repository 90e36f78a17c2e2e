"""In-memory holder for the reference text every answer is grounded in."""

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class ContentLoadError(Exception):
    """Raised when the reference text cannot be read at startup."""


class ContentStore:
    """Holds the poetry book text once it has been loaded.

    A store starts out empty and becomes ready after a single successful call
    to :meth:`load`. The text is never changed after that.

    Attributes:
        path: Location of the reference text file
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._text: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        """Whether the reference text has been loaded."""
        return self._text is not None

    @property
    def text(self) -> str:
        """The loaded reference text.

        Raises:
            RuntimeError: If the store has not been loaded yet
        """
        if self._text is None:
            raise RuntimeError("Content store accessed before it was loaded")
        return self._text

    def load(self) -> None:
        """Read the reference text from disk and mark the store ready.

        Raises:
            ContentLoadError: If the file cannot be read or holds no text
            RuntimeError: If the store was already loaded
        """
        if self._text is not None:
            raise RuntimeError("Content store is already loaded")

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentLoadError(f"Could not read {self.path}: {e}") from e

        text = raw.strip()
        if not text:
            raise ContentLoadError(f"{self.path} contains no text")

        self._text = text
        logger.info(f"Loaded {self.path.name} ({len(text)} characters)")

    @classmethod
    def from_text(cls, text: str, path: Union[str, Path] = "<memory>") -> "ContentStore":
        """Create an already loaded store from a string."""
        store = cls(path)
        stripped = text.strip()
        if not stripped:
            raise ContentLoadError("Reference text is empty")
        store._text = stripped
        return store
