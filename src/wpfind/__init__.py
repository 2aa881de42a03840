"""Find WordPress installs on the filesystem."""

from .errors import FinderError, FormatError, InputPathError
from .finder import (
    FindRecord,
    InstallFinder,
    TraversalConfig,
    TraversalState,
    find_installs,
    resolve_root,
)
from .ignore import IGNORED_PATHS, IgnoreMatcher
from .version import extract_version, read_version

__version__ = "0.1.0"

__all__ = [
    "FinderError",
    "FormatError",
    "InputPathError",
    "FindRecord",
    "InstallFinder",
    "TraversalConfig",
    "TraversalState",
    "find_installs",
    "resolve_root",
    "IGNORED_PATHS",
    "IgnoreMatcher",
    "extract_version",
    "read_version",
]
