"""
Comment command.

Resolves the target directory, discovers source files and rewrites each
one with generated comments, or only reports what would change when
running in dry-run mode.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ai_comments.commenting import CommentSource, CommentTransformer
from ai_comments.config import CommenterOptions
from ai_comments.discovery import collect_source_files
from ..errors import PREFIX, InvalidTargetError, handle_cli_exception

logger = logging.getLogger(__name__)


@dataclass
class CommentRunSummary:
    """What a single run found and changed."""
    files_found: int = 0
    changed: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)
    comments_inserted: int = 0
    dry_run: bool = False


def resolve_target(target: str, cwd: Path) -> Path:
    """
    Resolve the target directory against the working directory.

    Raises:
        InvalidTargetError: If the path is missing or not a directory
    """
    full_path = (Path(cwd) / target).resolve()
    if not full_path.is_dir():
        raise InvalidTargetError(
            f"Target path is not a directory: {full_path}",
            hint="Pass an existing source directory, e.g. 'ai-comments src'",
        )
    return full_path


async def run_comment(
    options: CommenterOptions,
    cwd: Path,
    source: Optional[CommentSource] = None,
) -> CommentRunSummary:
    """
    Comment every source file under the configured target.

    Files are handled one at a time.  A file that cannot be read or written
    is reported on stderr and skipped; the rest of the batch continues.

    Args:
        options: Resolved runtime options
        cwd: Directory the target is resolved against
        source: Comment source override (heuristics by default)

    Returns:
        CommentRunSummary describing the run
    """
    root = resolve_target(options.target, cwd)
    summary = CommentRunSummary(dry_run=options.dry_run)

    files = collect_source_files(root, options.extensions, options.skip_dirs)
    summary.files_found = len(files)
    if not files:
        print(f"{PREFIX} No source files found to process.")
        return summary

    print(f"{PREFIX} Processing {len(files)} file(s)...")
    if options.dry_run:
        print(f"{PREFIX} Dry run: no files will be written.")

    transformer = CommentTransformer(
        source=source,
        max_snippet_lines=options.max_snippet_lines,
        comment_marker=options.comment_marker,
    )

    for file in files:
        try:
            original = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{PREFIX} Skipping {file}: {exc}", file=sys.stderr)
            summary.failed.append(file)
            continue

        result = await transformer.transform(original, str(file))
        for warning in result.warnings:
            print(f"{PREFIX} Warning: {warning}", file=sys.stderr)
        if not result.is_changed:
            continue

        if options.dry_run:
            print(f"{PREFIX} (dry-run) Would update: {file}")
        else:
            try:
                file.write_text(result.text, encoding="utf-8")
            except OSError as exc:
                print(f"{PREFIX} Failed to write {file}: {exc}", file=sys.stderr)
                summary.failed.append(file)
                continue
            print(f"{PREFIX} Updated: {file}")
        summary.changed.append(file)
        summary.comments_inserted += result.comment_count()

    verb = "would be updated" if options.dry_run else "updated"
    print(
        f"{PREFIX} {len(summary.changed)} file(s) {verb}, "
        f"{summary.comments_inserted} comment(s) inserted."
    )
    return summary


def cmd_comment(args: argparse.Namespace) -> None:
    """
    Handle the default command: comment files under ``args.target``.

    Args:
        args: Parsed command-line arguments containing:
            - options: CommenterOptions resolved by ``main``
            - cwd: Working directory the target is resolved against
    """
    options: CommenterOptions = args.options
    try:
        summary = asyncio.run(run_comment(options, Path(args.cwd)))
        logger.debug("Run finished: %s", summary)
    except SystemExit:
        raise
    except Exception as exc:
        handle_cli_exception(exc, verbose=options.verbose, reraise=options.reraise)


__all__ = ["CommentRunSummary", "cmd_comment", "resolve_target", "run_comment"]
