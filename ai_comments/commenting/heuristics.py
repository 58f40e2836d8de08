"""
Heuristic comment generation.

Builds a one or two sentence description of a function from three
independent passes over its snippet:

1. the verb implied by the function name prefix,
2. the parameter names found on the declaration line,
3. side effects recognised in the following body lines.

Nothing here performs I/O; every function is safe to call on arbitrary
text and the public entry point always returns a non-empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Pattern, Sequence, Tuple
import re


# (prefixes, verb) in priority order; the first matching prefix wins.
VERB_PREFIXES: List[Tuple[Tuple[str, ...], str]] = [
    (("get",), "Gets"),
    (("set",), "Sets"),
    (("create", "build"), "Creates"),
    (("update",), "Updates"),
    (("delete", "remove"), "Deletes"),
    (("validate",), "Validates"),
    (("send",), "Sends"),
    (("fetch", "load"), "Fetches"),
    (("calculate", "compute"), "Calculates"),
]

DEFAULT_VERB = "Handles"
DEFAULT_NAME = "this function"
DEFAULT_SUBJECT = "the requested operation"


@dataclass(frozen=True)
class CommentMetadata:
    """Identifying context handed to comment sources."""
    function_name: str
    file_path: str = ""


@dataclass(frozen=True)
class EffectRule:
    """A body pattern and the phrase it contributes when it fires."""
    phrase: str
    patterns: Tuple[Pattern[str], ...]
    # Patterns that only count when "modal" appears somewhere in the body.
    modal_patterns: Tuple[Pattern[str], ...] = ()

    def matches(self, body: str, mentions_modal: bool) -> bool:
        if any(p.search(body) for p in self.patterns):
            return True
        return mentions_modal and any(p.search(body) for p in self.modal_patterns)


def _compile(*patterns: str) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(p, re.ASCII) for p in patterns)


EFFECT_RULES: List[EffectRule] = [
    EffectRule(
        "updates local state or form fields",
        _compile(r"\bset[A-Z][a-zA-Z0-9_]*\s*\(", r"\bsetState\s*\("),
    ),
    EffectRule(
        "resets related fields or state",
        _compile(r"\breset[A-Z]?[a-zA-Z0-9_]*\s*\(", r"\bresetFields?\b"),
    ),
    EffectRule(
        "closes a modal dialog",
        _compile(r"\.closeModal\s*\("),
        modal_patterns=_compile(r"\bclose\s*\(\)"),
    ),
    EffectRule(
        "opens a modal dialog",
        _compile(r"\.openModal\s*\("),
        modal_patterns=_compile(r"\bopen\s*\(\)"),
    ),
    EffectRule(
        "performs an HTTP request",
        _compile(r"\bfetch\s*\(", r"\baxios\.", r"\.get\s*\(", r"\.post\s*\("),
    ),
    EffectRule(
        "logs debug information to the console",
        _compile(r"\bconsole\.log\b"),
    ),
]

_MODAL = re.compile(r"modal", re.IGNORECASE)
_PARAM_LIST = re.compile(r"\(([^)]*)\)")
_PARAM_NAME_END = re.compile(r"[:=]")
_LEADING_LOWER = re.compile(r"^[a-z]+")
_LEADING_SIGIL = re.compile(r"^[_$]")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[_-]+")


def infer_verb(name: str) -> str:
    lower = name.lower()
    for prefixes, verb in VERB_PREFIXES:
        if lower.startswith(prefixes):
            return verb
    return DEFAULT_VERB


def readable_subject(name: str) -> str:
    """
    Turn a function name into the object of the leading verb.

    ``getUserData`` becomes ``User Data``; a name that is nothing but a
    lowercase verb (``frobnicate``) keeps the whole name as its subject.
    """
    subject = _LEADING_SIGIL.sub("", _LEADING_LOWER.sub("", name, count=1), count=1) or name
    subject = _CAMEL_BOUNDARY.sub(r"\1 \2", subject)
    subject = _SEPARATORS.sub(" ", subject).strip()
    return subject or DEFAULT_SUBJECT


def extract_parameters(first_line: str) -> List[str]:
    """
    Names of the parameters listed on a declaration line.

    Only the first ``(...)`` group on the line is considered. Type
    annotations and default values are stripped from each entry.
    """
    match = _PARAM_LIST.search(first_line)
    if not match:
        return []
    names = []
    for token in match.group(1).split(","):
        token = token.strip()
        if not token:
            continue
        name = _PARAM_NAME_END.split(token, maxsplit=1)[0].strip()
        if name:
            names.append(name)
    return names


def detect_effects(body: str) -> List[str]:
    mentions_modal = bool(_MODAL.search(body))
    return [rule.phrase for rule in EFFECT_RULES if rule.matches(body, mentions_modal)]


def find_used_parameters(names: Sequence[str], body: str) -> List[str]:
    return [name for name in names if re.search(rf"\b{re.escape(name)}\b", body, flags=re.ASCII)]


def join_phrases(items: Sequence[str]) -> str:
    """``a`` / ``a and b`` / ``a, b and c``."""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]


def build_heuristic_comment(snippet: str, metadata: CommentMetadata) -> str:
    """
    Describe a function from its snippet without any external service.

    Args:
        snippet: Declaration line followed by the first lines of the body
        metadata: Function name and file path of the declaration

    Returns:
        Space-separated sentences, without comment markers
    """
    name = metadata.function_name or DEFAULT_NAME
    lines = snippet.split("\n")
    body = "\n".join(lines[1:])

    param_names = extract_parameters(lines[0])
    effects = detect_effects(body)
    used_params = find_used_parameters(param_names, body)

    sentences = [f"{infer_verb(name)} {readable_subject(name)}."]
    if effects:
        sentences.append(f"It {join_phrases(effects)}.")
    elif used_params:
        sentences.append(f"It uses {join_phrases(used_params)} as input data.")
    elif param_names:
        sentences.append(f"It accepts {join_phrases(param_names)} to configure the behavior.")

    return " ".join(sentences)


__all__ = [
    "CommentMetadata",
    "DEFAULT_VERB",
    "EFFECT_RULES",
    "EffectRule",
    "VERB_PREFIXES",
    "build_heuristic_comment",
    "detect_effects",
    "extract_parameters",
    "find_used_parameters",
    "infer_verb",
    "join_phrases",
    "readable_subject",
]
