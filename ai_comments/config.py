"""Runtime options for the ai-comments CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple

from .errors import ConfigurationError


DEFAULT_EXTENSIONS: Tuple[str, ...] = (".js", ".ts", ".jsx", ".tsx")
DEFAULT_SKIP_DIRS: Tuple[str, ...] = ("node_modules",)
DEFAULT_SNIPPET_LINES = 8

LOG_LEVELS = ("debug", "info", "warn", "warning", "error")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class CommenterOptions:
    """Options resolved for a single CLI invocation."""

    target: str = "src"
    dry_run: bool = False
    max_snippet_lines: int = DEFAULT_SNIPPET_LINES
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    skip_dirs: Tuple[str, ...] = DEFAULT_SKIP_DIRS
    comment_marker: str = "//"
    log_level: str = "warn"
    verbose: bool = False
    reraise: bool = False


def _env_flag(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def _parse_snippet_lines(value: Any, source: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Invalid snippet line count {value!r} from {source}",
            hint="Use a positive integer",
        ) from None
    if number < 1:
        raise ConfigurationError(
            f"Snippet line count must be at least 1, got {number} from {source}",
            hint="Use a positive integer",
        )
    return number


def _parse_log_level(value: str, source: str) -> str:
    level = value.strip().lower()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {value!r} from {source}",
            hint=f"Choose one of: {', '.join(LOG_LEVELS)}",
        )
    return level


def load_options(args: Any = None, environ: Optional[Mapping[str, str]] = None) -> CommenterOptions:
    """
    Resolve options from defaults, environment variables and CLI arguments.

    Later layers win: defaults < ``AI_COMMENTS_*`` environment variables <
    explicitly supplied command-line arguments.

    Args:
        args: Parsed ``argparse.Namespace`` (or any object with matching
            attributes); missing or ``None`` attributes are ignored
        environ: Environment mapping, ``os.environ`` when omitted

    Returns:
        Fully resolved CommenterOptions

    Raises:
        ConfigurationError: If an environment or argument value is invalid
    """
    env = os.environ if environ is None else environ
    options = CommenterOptions()

    level = env.get("AI_COMMENTS_LOG_LEVEL")
    if level:
        options = replace(options, log_level=_parse_log_level(level, "AI_COMMENTS_LOG_LEVEL"))
    if _env_flag(env.get("AI_COMMENTS_VERBOSE")) or _env_flag(env.get("AI_COMMENTS_DEBUG")):
        options = replace(options, verbose=True)
    if _env_flag(env.get("AI_COMMENTS_RERAISE")) or _env_flag(env.get("AI_COMMENTS_DEBUG")):
        options = replace(options, reraise=True)
    snippet_lines = env.get("AI_COMMENTS_MAX_SNIPPET_LINES")
    if snippet_lines:
        options = replace(
            options,
            max_snippet_lines=_parse_snippet_lines(snippet_lines, "AI_COMMENTS_MAX_SNIPPET_LINES"),
        )

    if args is None:
        return options

    target = getattr(args, "target", None)
    if target:
        options = replace(options, target=target)
    if getattr(args, "dry_run", False):
        options = replace(options, dry_run=True)
    if getattr(args, "verbose", False):
        options = replace(options, verbose=True)
    arg_level = getattr(args, "log_level", None)
    if arg_level:
        options = replace(options, log_level=_parse_log_level(arg_level, "--log-level"))
    arg_lines = getattr(args, "max_snippet_lines", None)
    if arg_lines is not None:
        options = replace(options, max_snippet_lines=_parse_snippet_lines(arg_lines, "--max-snippet-lines"))
    return options


__all__ = [
    "CommenterOptions",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_SKIP_DIRS",
    "DEFAULT_SNIPPET_LINES",
    "LOG_LEVELS",
    "load_options",
]
