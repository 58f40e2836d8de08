"""
Comment sources.

A comment source turns a function snippet into explanatory text.  The
transformer only depends on the abstract interface, so a networked
backend can replace the local heuristics without touching callers.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

from .heuristics import CommentMetadata, build_heuristic_comment

logger = logging.getLogger(__name__)


class CommentSource(ABC):
    """Abstract base class for comment sources"""

    name = "abstract"

    @abstractmethod
    async def generate(self, snippet: str, metadata: CommentMetadata) -> Optional[str]:
        """
        Produce a comment for a function snippet.

        Implementations may return None or an empty string when they have
        nothing to say, and may raise CommentSourceError on failure; in
        both cases no comment is inserted for that function.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class HeuristicCommentSource(CommentSource):
    """Local, deterministic comments built from names and body patterns"""

    name = "heuristic"

    async def generate(self, snippet: str, metadata: CommentMetadata) -> Optional[str]:
        comment = build_heuristic_comment(snippet, metadata)
        logger.debug("Heuristic comment for %s: %s", metadata.function_name, comment)
        return comment


def get_default_source() -> CommentSource:
    return HeuristicCommentSource()


__all__ = ["CommentSource", "HeuristicCommentSource", "get_default_source"]
