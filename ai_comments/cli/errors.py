"""
Error reporting for the ai-comments command line.

Failures that reach the top of a command are rendered on stderr with the
``[ai-comments]`` prefix and end the process with status 1. Whether a
traceback is appended, or the exception re-raised, is decided by the
resolved ``CommenterOptions`` rather than by reading the environment here.
"""

import sys
import traceback
from typing import Optional

from ai_comments.errors import CommentError

PREFIX = "[ai-comments]"

_DETAIL_LIMIT = 280
_TRACE_LIMIT = 4000


class CLIError(Exception):
    """An expected failure reported to the user without a traceback."""

    code = "CLI_ERROR"

    def __init__(self, message: str, *, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class InvalidTargetError(CLIError):
    """The target path does not exist or is not a directory."""

    code = "CLI_FILE_NOT_FOUND"


def _clip_head(text: str, limit: int) -> str:
    return text if len(text) <= limit else f"{text[:limit - 3]}..."


def _clip_tail(text: str, limit: int) -> str:
    # The innermost frames sit at the end of a traceback.
    return text if len(text) <= limit else f"...{text[-(limit - 3):]}"


def describe_exception(exc: BaseException) -> str:
    """``Type: message`` on one line, clipped for terminal output."""
    return _clip_head(f"{type(exc).__name__}: {exc}", _DETAIL_LIMIT)


def traceback_excerpt(exc: BaseException) -> str:
    """The traceback attached to ``exc``, keeping its last frames."""
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return _clip_tail(trace.strip(), _TRACE_LIMIT)


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """
    Render ``exc`` for stderr.

    Examples:
        >>> print(format_cli_error(InvalidTargetError("No src", hint="Create it")))
        [ai-comments] Error [CLI_FILE_NOT_FOUND]: No src
        Hint: Create it
    """
    if isinstance(exc, CLIError):
        lines = [f"{PREFIX} Error [{exc.code}]: {exc.message}"]
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
    elif isinstance(exc, CommentError):
        lines = [f"{PREFIX} Error: {exc.format()}"]
    else:
        lines = [f"{PREFIX} Error: {describe_exception(exc)}"]

    if verbose:
        lines.append("Traceback:")
        lines.append(traceback_excerpt(exc))
    return "\n".join(lines)


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    reraise: bool = False,
    exit_code: int = 1,
) -> None:
    """Report ``exc`` and exit, or re-raise it when ``reraise`` is set."""
    if reraise:
        raise exc
    print(format_cli_error(exc, verbose=verbose), file=sys.stderr)
    sys.exit(exit_code)


__all__ = [
    "CLIError",
    "InvalidTargetError",
    "describe_exception",
    "format_cli_error",
    "handle_cli_exception",
    "traceback_excerpt",
]
