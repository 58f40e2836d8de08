"""
ai-comments CLI entry point.

Scans a directory of JavaScript/TypeScript sources and inserts a short
generated comment above every function that does not already have one.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ai_comments import __version__
from ai_comments.config import load_options

from .commands import cmd_comment
from .errors import handle_cli_exception


def _configure_logging(level_name: str) -> None:
    """Configure the package logger for the requested level."""
    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }
    numeric_level = level_map.get(level_name.lower(), logging.WARNING)

    package_logger = logging.getLogger('ai_comments')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Insert heuristic comments above uncommented JS/TS functions",
        prog="ai-comments"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        'target',
        nargs='?',
        default='src',
        help='Directory to scan, relative to the current directory (default: src)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Report files that would change without writing them'
    )
    parser.add_argument(
        '--max-snippet-lines',
        type=int,
        default=None,
        metavar='N',
        help='Number of lines, starting at the declaration, used to build a comment (default: 8)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set AI_COMMENTS_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set AI_COMMENTS_LOG_LEVEL)'
    )
    parser.set_defaults(func=cmd_comment)
    return parser


def main(argv: Optional[list] = None, cwd: Optional[Path] = None) -> None:
    """
    Main CLI entrypoint.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])
        cwd: Directory the target is resolved against (None uses the
            process working directory)

    Examples:
        Comment everything under ./src:
        >>> main(['src'])  # doctest: +SKIP

        Preview changes only:
        >>> main(['lib', '--dry-run'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    args.cwd = Path(cwd) if cwd is not None else Path.cwd()

    try:
        args.options = load_options(args)
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    _configure_logging(args.options.log_level)

    args.func(args)


__all__ = ["build_parser", "main"]


if __name__ == '__main__':  # pragma: no cover
    main()
