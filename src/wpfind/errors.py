"""Error definitions for wpfind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_PATH_NOT_FOUND = "E_PATH_NOT_FOUND"
E_INVALID_FIELD = "E_INVALID_FIELD"
E_INVALID_FORMAT = "E_INVALID_FORMAT"


@dataclass
class FinderError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class InputPathError(FinderError):
    """The search root does not resolve to an existing path."""


class FormatError(FinderError):
    pass


def path_error(path: str) -> InputPathError:
    return InputPathError(
        code=E_PATH_NOT_FOUND,
        message=f"Path does not exist: {path}",
        context={"path": path},
    )


__all__ = [
    "FinderError",
    "InputPathError",
    "FormatError",
    "path_error",
    "E_PATH_NOT_FOUND",
    "E_INVALID_FIELD",
    "E_INVALID_FORMAT",
]
