from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .errors import path_error
from .ignore import IgnoreMatcher
from .logging import ElapsedLogger, get_logger
from .version import MARKER_DIR, MARKER_FILE, read_version

__all__ = [
    "FindRecord",
    "InstallFinder",
    "ResultSet",
    "TraversalConfig",
    "TraversalState",
    "find_installs",
    "resolve_root",
]


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    root: Path
    skip_ignored_paths: bool = False
    max_depth: Optional[int] = None
    verbose: bool = False
    exclude: Tuple[str, ...] = ()
    logger: logging.Logger | None = None


@dataclass(frozen=True, slots=True)
class FindRecord:
    version_path: str
    version: str
    depth: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "version_path": self.version_path,
            "version": self.version,
            "depth": self.depth,
        }


@dataclass(slots=True)
class TraversalState:
    start_time: float = field(default_factory=time.monotonic)
    current_depth: int = 0


ResultSet = Dict[str, FindRecord]


def resolve_root(value: str | os.PathLike[str]) -> Path:
    """Resolve the search root, failing before any traversal if it is missing."""
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = Path.cwd() / p
    if not p.exists():
        raise path_error(str(value))
    return p.resolve()


def _display(path: Path) -> str:
    return str(path).rstrip(os.sep) + os.sep


class InstallFinder:
    """Walk a directory tree depth-first and collect WordPress installs.

    Each node goes through the same checks in order: symlink, ignored path,
    marker directory, depth limit. Only a node that survives all of them is
    listed, and its subdirectories are pushed on the work stack one level
    deeper. Failures to list a directory, or to inspect or read a marker
    file, only end that branch.
    """

    def __init__(
        self, config: TraversalConfig, matcher: IgnoreMatcher | None = None
    ) -> None:
        self._config = config
        self._root = resolve_root(config.root)
        self._matcher = matcher or IgnoreMatcher.from_patterns(config.exclude)
        self._state = TraversalState()
        self._results: ResultSet = {}
        self._log = ElapsedLogger(config.logger or get_logger(), self._state.start_time)
        # Progress lines are info when verbose, debug otherwise.
        self._level = logging.INFO if config.verbose else logging.DEBUG

    @property
    def root(self) -> Path:
        return self._root

    @property
    def state(self) -> TraversalState:
        return self._state

    @property
    def results(self) -> ResultSet:
        return self._results

    def run(self) -> ResultSet:
        self._state.start_time = self._log.start = time.monotonic()
        self._log.log(
            self._level, "Searching for WordPress installs in %s", self._config.root
        )
        self.traverse(self._root)
        self._log.debug("Found %d install(s)", len(self._results))
        return self._results

    def traverse(self, path: Path) -> None:
        entry_depth = self._state.current_depth
        stack: List[Tuple[Path, int]] = [(path, entry_depth)]
        try:
            while stack:
                current, depth = stack.pop()
                self._state.current_depth = depth
                stack.extend(self._visit(current, depth))
        finally:
            self._state.current_depth = entry_depth

    def _visit(self, path: Path, depth: int) -> List[Tuple[Path, int]]:
        # Assume a symlink will be reached through its real location.
        if path.is_symlink():
            self._log.debug("Skipping symlink %s", path)
            return []

        shown = _display(path)

        if not self._config.skip_ignored_paths:
            if self._matcher.match_ignored(path, self._root) is not None:
                self._log.log(
                    self._level,
                    "Matched ignored path. Skipping recursion into %s",
                    shown,
                )
                return []

        if self._matcher.match_excluded(path, self._root):
            self._log.log(
                self._level,
                "Matched exclude pattern. Skipping recursion into %s",
                shown,
            )
            return []

        if path.name == MARKER_DIR:
            marker = path / MARKER_FILE
            try:
                is_marker = marker.is_file()
            except OSError as exc:
                self._log.warning("Unable to inspect %s: %s", marker, exc)
                return []
            if is_marker:
                self._record(marker, depth)
                return []

        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            self._log.log(
                self._level, "Exceeded max depth. Skipping recursion into %s", shown
            )
            return []

        self._log.log(self._level, "Recursing into %s", shown)
        try:
            entries = sorted(path.iterdir(), reverse=True)
        except OSError as exc:
            self._log.warning("Skipping unreadable directory %s: %s", shown, exc)
            return []

        return [(entry, depth + 1) for entry in entries if self._is_dir(entry)]

    def _is_dir(self, entry: Path) -> bool:
        try:
            return entry.is_dir()
        except OSError as exc:
            self._log.warning("Unable to inspect %s: %s", entry, exc)
            return False

    def _record(self, marker: Path, depth: int) -> None:
        try:
            version = read_version(marker)
        except OSError as exc:
            self._log.warning("Unable to read %s: %s", marker, exc)
            return
        key = str(marker)
        # The install root sits one level above wp-includes.
        self._results[key] = FindRecord(key, version, depth - 1)
        self._log.log(self._level, "Found WordPress install at %s", key)


def find_installs(config: TraversalConfig) -> ResultSet:
    return InstallFinder(config).run()
