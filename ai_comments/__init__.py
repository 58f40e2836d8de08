"""
ai-comments: offline comment scaffolding for JavaScript/TypeScript sources.

The package scans a source tree and inserts short, heuristically generated
comments above function definitions that do not already have one.  No
network service is involved; comments are derived from the function name,
its parameters and a few recognisable patterns in the first lines of its
body.

The code is organised into several modules:

* ``commenting`` – the line scanner, the heuristic generator, the
  pluggable comment sources and the per-file transformer.
* ``discovery`` – recursive collection of the files to process.
* ``config`` – runtime options resolved from defaults, environment
  variables and command-line arguments.
* ``cli`` – the ``ai-comments`` command that ties everything together.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
  root = Path(__file__).resolve().parents[1]
  pyproject = root / "pyproject.toml"
  if not pyproject.exists():
    return None
  try:
    text = pyproject.read_text(encoding="utf-8")
  except OSError:  # pragma: no cover - IO errors should not break imports
    return None
  match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
  if match:
    return match.group(1)
  return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("ai-comments")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
  __version__ = _local_version() or "0.1.0"

__all__ = ["__version__"]
