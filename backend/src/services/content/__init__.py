"""Reference text storage package."""

from .content_store import ContentLoadError, ContentStore

__all__ = ["ContentStore", "ContentLoadError"]
