"""Command implementations for the ai-comments CLI."""

from .comment import CommentRunSummary, cmd_comment, resolve_target, run_comment

__all__ = ["CommentRunSummary", "cmd_comment", "resolve_target", "run_comment"]
