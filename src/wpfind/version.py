"""Read the WordPress version out of ``wp-includes/version.php``.

The marker file belongs to the WordPress install and is only ever scanned as
text. It is never included or evaluated.
"""

from __future__ import annotations

import re
from pathlib import Path

__all__ = ["MARKER_DIR", "MARKER_FILE", "extract_version", "read_version"]

MARKER_DIR = "wp-includes"
MARKER_FILE = "version.php"

_VERSION_RE = re.compile(r"""\$wp_version\s*=\s*['"]([^'"]+)['"]""")


def extract_version(contents: str) -> str:
    """Return the first ``$wp_version`` string literal in *contents*, or ``""``."""
    match = _VERSION_RE.search(contents)
    return match.group(1) if match else ""


def read_version(path: Path) -> str:
    # OSError propagates; the caller decides whether the branch is dead.
    contents = path.read_text(encoding="utf-8", errors="replace")
    return extract_version(contents)
