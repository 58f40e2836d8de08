"""Line-oriented function detection and snippet extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence
import re


_IDENT = r"[a-zA-Z0-9_$]+"

# Tried in order; the first pattern that matches wins.
FUNCTION_PATTERNS: List[Pattern[str]] = [
    re.compile(rf"^function\s+({_IDENT})\s*\(", re.ASCII),
    re.compile(rf"^const\s+({_IDENT})\s*=\s*\(", re.ASCII),
    re.compile(rf"^const\s+({_IDENT})\s*=\s*async\s*\(", re.ASCII),
    re.compile(rf"^const\s+({_IDENT})\s*=\s*\w*\s*=>", re.ASCII),
]

COMMENT_PREFIXES = ("//", "/*")


@dataclass(frozen=True)
class FunctionMatch:
    """A line that looks like the start of a function declaration."""
    name: str
    line_index: int
    raw_line: str


def detect_function(line: str, line_index: int = 0) -> Optional[FunctionMatch]:
    """
    Check whether a single line starts a function declaration.

    Matching is lexical over the trimmed line: signatures split across
    lines are not seen, and matching text inside strings or comments
    counts as a declaration.

    Args:
        line: Raw source line
        line_index: Position of the line in its file (0-based)

    Returns:
        FunctionMatch with the captured name, or None
    """
    trimmed = line.strip()
    for pattern in FUNCTION_PATTERNS:
        match = pattern.match(trimmed)
        if match:
            return FunctionMatch(name=match.group(1), line_index=line_index, raw_line=line)
    return None


def has_comment_above(previous_line: Optional[str]) -> bool:
    """Return True if the previously emitted line opens a comment."""
    if previous_line is None:
        return False
    return previous_line.strip().startswith(COMMENT_PREFIXES)


def build_snippet(lines: Sequence[str], start_index: int, max_lines: int = 8) -> str:
    """Current line plus the few that follow, clipped to the end of the file."""
    end = min(len(lines), start_index + max_lines)
    return "\n".join(lines[start_index:end])


__all__ = [
    "FUNCTION_PATTERNS",
    "FunctionMatch",
    "build_snippet",
    "detect_function",
    "has_comment_above",
]
