"""
Exception hierarchy for the ScopeGen outline toolkit.

The outline extractor and the renderers never raise for well-typed input.
These exceptions cover the I/O-facing layers: the post library and the
remote markdown fetcher.
"""

from __future__ import annotations

from typing import Any


class OutlineError(Exception):
    """Base exception for all outline toolkit errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PostNotFoundError(OutlineError):
    """Raised when a post ID does not match any file in the library.

    Attributes:
        post_id: The ID that was looked up
        available: IDs that do exist in the library
    """

    def __init__(self, post_id: str, available: list[str] | None = None):
        self.post_id = post_id
        self.available = available or []
        super().__init__(
            f"Post '{post_id}' not found",
            details={"post_id": post_id, "available": self.available},
        )


class FrontMatterError(OutlineError):
    """Raised when a post's YAML front matter cannot be parsed."""


class FetchError(OutlineError):
    """Raised when a remote markdown document cannot be fetched.

    Provides a user-facing message explaining what went wrong.
    """


class PostEncodingError(OutlineError):
    """Raised when a post file is not valid UTF-8."""
