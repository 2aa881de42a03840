from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from pathspec import PathSpec

__all__ = ["IGNORED_PATHS", "IgnoreMatcher"]

# Paths that probably don't hold a fresh install. Matched as substrings.
IGNORED_PATHS: Tuple[str, ...] = (
    # System directories
    "/.ssh/",
    "/.git/",
    "/.svn/",
    "/.subversion/",
    "/__MACOSX/",
    # Webserver directories
    "/cache/",
    "/logs/",
    "/debuglogs/",
    "/Maildir/",
    "/tmp/",
    # Generic application directories
    "/uploads/",
    "/themes/",
    "/plugins/",
    "/modules/",
    # Dependency management
    "/node_modules/",
    "/bower_components/",
    "/vendor/",
    # Already inside a WordPress install
    "/wp-admin/",
    "/wp-content/",
)


class IgnoreMatcher:
    """Decide whether a directory below the search root should be pruned.

    Built-in fragments are compared case-insensitively as plain substrings of
    the root-relative path, so ``/themes/`` matches ``/a/themes/b/`` but not
    ``/my-themes-backup/``. User exclude patterns use gitignore syntax.
    """

    def __init__(
        self,
        fragments: Sequence[str] = IGNORED_PATHS,
        exclude: Optional[PathSpec] = None,
    ) -> None:
        self._fragments = tuple(fragments)
        self._lowered = tuple(fragment.lower() for fragment in self._fragments)
        self._exclude = exclude

    @classmethod
    def from_patterns(
        cls, patterns: Iterable[str] | None, fragments: Sequence[str] = IGNORED_PATHS
    ) -> "IgnoreMatcher":
        lines = [p.strip() for p in patterns or [] if p.strip()]
        spec = PathSpec.from_lines("gitwildmatch", lines) if lines else None
        return cls(fragments, spec)

    @property
    def fragments(self) -> Tuple[str, ...]:
        return self._fragments

    @staticmethod
    def compared_path(path: Path, root: Path) -> str:
        """Root-relative form of *path* with one leading and one trailing slash."""
        if path == root:
            return "/"
        try:
            rel = path.relative_to(root).as_posix()
        except ValueError:
            rel = path.as_posix().strip("/")
        return f"/{rel}/"

    def match_ignored(self, path: Path, root: Path) -> Optional[str]:
        compared = self.compared_path(path, root).lower()
        for fragment, lowered in zip(self._fragments, self._lowered):
            if lowered in compared:
                return fragment
        return None

    def match_excluded(self, path: Path, root: Path) -> bool:
        if self._exclude is None or path == root:
            return False
        rel = self.compared_path(path, root).strip("/")
        return self._exclude.match_file(rel) or self._exclude.match_file(f"{rel}/")
