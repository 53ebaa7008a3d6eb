"""Package-specific exception types."""

from __future__ import annotations


class TocError(Exception):
    """Base class for markdown-toc errors."""


class NoActiveDocumentError(TocError):
    """Raised when a command runs without an eligible Markdown document.

    Args:
        reason: Optional detail appended to the user-facing message.
    """

    message = "No active Markdown editor found."

    def __init__(self, reason: str | None = None):
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.reason:
            return f"{self.message}\n{self.reason}"
        return self.message


class DocumentError(TocError):
    """Raised when a file-backed document cannot be loaded or saved."""
