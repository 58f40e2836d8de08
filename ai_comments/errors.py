"""Error types shared by the commenting core and the CLI."""

from __future__ import annotations

from typing import Optional


class CommentError(Exception):
    """
    Base class for errors raised while commenting source files.

    Subclasses set ``code``, a stable identifier shown in CLI output.
    ``path`` and ``line`` point at the function being commented when known.
    """

    code = "COMMENT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line
        self.hint = hint

    @property
    def where(self) -> Optional[str]:
        """``path:line``, ``path`` or None."""
        if not self.path:
            return None
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"

    def format(self) -> str:
        """Single-line rendering, e.g. ``a.js:3: offline [COMMENT_SOURCE_ERROR]``."""
        text = f"{self.message} [{self.code}]"
        if self.where:
            text = f"{self.where}: {text}"
        if self.hint:
            text = f"{text} (hint: {self.hint})"
        return text


class CommentSourceError(CommentError):
    """Raised when a comment source cannot produce a comment."""

    code = "COMMENT_SOURCE_ERROR"


class ConfigurationError(CommentError):
    """Raised when runtime options or environment overrides are invalid."""

    code = "CONFIG_ERROR"


__all__ = [
    "CommentError",
    "CommentSourceError",
    "ConfigurationError",
]
