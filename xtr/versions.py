"""Version parsing for xpm install directories.

xpm installs every tool version into a directory named
``<toolVersion>-<packageVersion>``, e.g. ``13.2.1-1.1``. This module parses
those names and folds them down to the newest one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_LEADING_INT = re.compile(r"^\s*(\d+)")

Triplet = tuple[int, int, int]


@dataclass(frozen=True)
class ToolVersion:
    """A parsed version directory name."""

    tool_version: Triplet = (0, 0, 0)
    xpm_version: Triplet = (0, 0, 0)
    source_name: str = ""

    def __str__(self) -> str:
        return self.source_name or "{}-{}".format(
            ".".join(str(n) for n in self.tool_version),
            ".".join(str(n) for n in self.xpm_version),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.source_name,
            "tool_version": list(self.tool_version),
            "xpm_version": list(self.xpm_version),
        }


def _parse_segment(segment: str) -> int:
    m = _LEADING_INT.match(segment)
    return int(m.group(1)) if m else 0


def _parse_triplet(text: str) -> Triplet:
    parts = [_parse_segment(s) for s in text.split(".")[:3]]
    parts += [0] * (3 - len(parts))
    return (parts[0], parts[1], parts[2])


def parse_version(directory_name: str) -> ToolVersion:
    """Parse ``<toolVersion>-<packageVersion>`` into a ToolVersion.

    Each side holds up to three dot-separated numbers. Missing or
    non-numeric segments become 0; a segment with a numeric prefix
    (``"2rc1"``) keeps the prefix. Never raises: garbage in gives an
    all-zero version.

    Args:
        directory_name: Directory name, e.g. ``"13.2.1-1.1"``.

    Returns:
        The parsed version, carrying ``directory_name`` as ``source_name``.
    """
    tool_part, _, xpm_part = directory_name.partition("-")
    return ToolVersion(
        tool_version=_parse_triplet(tool_part),
        xpm_version=_parse_triplet(xpm_part),
        source_name=directory_name,
    )


def is_real_version(version: ToolVersion) -> bool:
    """False when the tool part is 0.0.0, i.e. the name was not a version."""
    return any(n != 0 for n in version.tool_version)


def compare_versions(current: Optional[ToolVersion], candidate: ToolVersion) -> ToolVersion:
    """Return the newer of two versions. Reducer for a max-fold.

    The tool triplet decides first, the xpm package triplet breaks ties.
    On a full tie ``current`` is kept. A missing ``current`` yields
    ``candidate``.
    """
    if current is None:
        return candidate
    for mine, theirs in zip(current.tool_version, candidate.tool_version):
        if mine > theirs:
            return current
        if mine < theirs:
            return candidate
    for mine, theirs in zip(current.xpm_version, candidate.xpm_version):
        if mine > theirs:
            return current
        if mine < theirs:
            return candidate
    return current
