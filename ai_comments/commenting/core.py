"""Core file transformation: insert generated comments above uncommented functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from ai_comments.config import DEFAULT_SNIPPET_LINES
from ai_comments.errors import CommentError
from .detection import build_snippet, detect_function, has_comment_above
from .heuristics import CommentMetadata
from .sources import CommentSource, get_default_source


@dataclass
class InsertedComment:
    """Comment lines inserted above one function."""
    function_name: str
    line_index: int
    lines: List[str]


@dataclass
class TransformResult:
    """Result of commenting a single file."""
    text: str
    is_changed: bool
    inserted: List[InsertedComment] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def success(self) -> bool:
        """Check if every detected function was handled without source failures."""
        return len(self.warnings) == 0

    def comment_count(self) -> int:
        return len(self.inserted)


class CommentTransformer:
    """
    Insert comments above function declarations that lack one.

    Lines are processed strictly in order.  Original lines are never
    changed, dropped or reordered; generated comment lines are only ever
    inserted immediately before a detected declaration whose previously
    emitted line is not already a comment, which makes the transform
    idempotent.
    """

    def __init__(
        self,
        source: Optional[CommentSource] = None,
        max_snippet_lines: int = DEFAULT_SNIPPET_LINES,
        comment_marker: str = "//",
    ):
        self.source = source or get_default_source()
        self.max_snippet_lines = max_snippet_lines
        self.comment_marker = comment_marker
        self.logger = logging.getLogger(__name__)

    async def transform(self, source_text: str, file_path: str = "") -> TransformResult:
        """
        Comment every uncommented function in a document.

        Args:
            source_text: Full text of the file
            file_path: Path used for metadata and log messages

        Returns:
            TransformResult with the updated text and what was inserted
        """
        lines = source_text.split("\n")
        out: List[str] = []
        inserted: List[InsertedComment] = []
        warnings: List[str] = []

        for index, line in enumerate(lines):
            match = detect_function(line, index)
            if match and not has_comment_above(out[-1] if out else None):
                comment_lines = await self._comment_lines(lines, match.name, index, file_path, warnings)
                if comment_lines:
                    out.extend(comment_lines)
                    inserted.append(InsertedComment(match.name, index, comment_lines))
            elif match:
                self.logger.debug("%s:%d: %s already has a comment", file_path, index + 1, match.name)
            out.append(line)

        text = "\n".join(out)
        return TransformResult(
            text=text,
            is_changed=text != source_text,
            inserted=inserted,
            warnings=warnings,
        )

    async def _comment_lines(
        self,
        lines: List[str],
        name: str,
        index: int,
        file_path: str,
        warnings: List[str],
    ) -> List[str]:
        snippet = build_snippet(lines, index, self.max_snippet_lines)
        metadata = CommentMetadata(function_name=name, file_path=file_path)
        try:
            comment = await self.source.generate(snippet, metadata)
        except CommentError as exc:
            self.logger.warning("Comment source %s failed for %s: %s", self.source.name, name, exc.format())
            warnings.append(f"{file_path}:{index + 1}: no comment for {name}: {exc.message}")
            return []
        except Exception as exc:
            self.logger.warning("Comment source %s failed for %s: %s", self.source.name, name, exc)
            warnings.append(f"{file_path}:{index + 1}: no comment for {name}: {exc}")
            return []

        parts = [part.strip() for part in str(comment or "").split("\n")]
        parts = [part for part in parts if part]
        if not parts:
            self.logger.warning("Comment source %s returned nothing for %s", self.source.name, name)
            warnings.append(f"{file_path}:{index + 1}: no comment for {name}: empty comment")
            return []

        self.logger.debug("%s:%d: commenting %s", file_path, index + 1, name)
        return [f"{self.comment_marker} {part}" for part in parts]


async def add_comments_to_source(
    source_text: str,
    file_path: str = "",
    source: Optional[CommentSource] = None,
    max_snippet_lines: int = DEFAULT_SNIPPET_LINES,
) -> str:
    """Return ``source_text`` with comments inserted above uncommented functions."""
    transformer = CommentTransformer(source=source, max_snippet_lines=max_snippet_lines)
    result = await transformer.transform(source_text, file_path)
    return result.text


__all__ = ["CommentTransformer", "InsertedComment", "TransformResult", "add_comments_to_source"]
