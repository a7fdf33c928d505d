"""Lookup results and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ResolveStatus(Enum):
    """Outcome of a path lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID = "invalid"                    # input was not a usable path
    DIRECTORY_MISSING = "directory_missing"  # xpm tool dir unreadable: reinstall
    NO_VERSION_FOUND = "no_version_found"    # tool dir holds no version: install


@dataclass(frozen=True)
class ResolveResult:
    """A lookup result. Truthy only when a path was found."""

    status: ResolveStatus
    path: Optional[str] = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.status == ResolveStatus.FOUND

    @classmethod
    def found(cls, path: str) -> "ResolveResult":
        return cls(ResolveStatus.FOUND, path=path)

    @classmethod
    def not_found(cls, reason: str = "") -> "ResolveResult":
        return cls(ResolveStatus.NOT_FOUND, reason=reason)

    @classmethod
    def invalid(cls, reason: str = "") -> "ResolveResult":
        return cls(ResolveStatus.INVALID, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status.value, "path": self.path, "reason": self.reason}


class ToolNotFoundError(Exception):
    """No usable version of a tool is installed."""

    status = ResolveStatus.NOT_FOUND

    def __init__(self, tool_name: str, detail: str = ""):
        self.tool_name = tool_name
        self.detail = detail
        msg = f"no tool found: {tool_name}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)

    def to_result(self) -> ResolveResult:
        return ResolveResult(self.status, reason=str(self))


class DirectoryMissingError(ToolNotFoundError):
    """The tool's install directory could not be read."""

    status = ResolveStatus.DIRECTORY_MISSING


class NoVersionFoundError(ToolNotFoundError):
    """The install directory exists but holds no version directory."""

    status = ResolveStatus.NO_VERSION_FOUND


class InvalidToolDefinitionError(ToolNotFoundError):
    """The definition cannot be installed through xpm."""

    status = ResolveStatus.INVALID
