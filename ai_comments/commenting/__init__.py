"""
Comment insertion for JavaScript/TypeScript sources.

This package provides the line scanner that finds function declarations,
the heuristic generator that describes them, the comment source
abstraction that lets other generators be plugged in, and the per-file
transformer that stitches the pieces together.
"""

from __future__ import annotations

__all__ = [
    "CommentMetadata",
    "CommentSource",
    "CommentTransformer",
    "FunctionMatch",
    "HeuristicCommentSource",
    "InsertedComment",
    "TransformResult",
    "add_comments_to_source",
    "build_heuristic_comment",
    "build_snippet",
    "detect_function",
    "has_comment_above",
]

from .core import CommentTransformer, InsertedComment, TransformResult, add_comments_to_source
from .detection import FunctionMatch, build_snippet, detect_function, has_comment_above
from .heuristics import CommentMetadata, build_heuristic_comment
from .sources import CommentSource, HeuristicCommentSource
