"""
Real implementations of interfaces for production use.

These classes wrap the host PATH and filesystem and implement the
abstract interfaces.
"""

from typing import Optional, List
import logging
import os
import shutil

from .interfaces import (
    ExecutableLocatorInterface, DirectoryListerInterface, DirEntry, EntryType
)

logger = logging.getLogger(__name__)


class RealExecutableLocator(ExecutableLocatorInterface):
    """
    Executable lookup using shutil.which.

    A bare command name is searched on PATH; anything containing a
    directory separator is checked in place.
    """

    def __init__(self, search_path: Optional[str] = None):
        self._search_path = search_path

    def which(self, path: str) -> Optional[str]:
        if not path:
            return None
        found = shutil.which(path, path=self._search_path)
        if not found:
            return None
        return os.path.abspath(found)


class RealDirectoryLister(DirectoryListerInterface):
    """
    Directory listing using os.scandir.
    """

    def list_entries(self, path: str) -> List[DirEntry]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                entries.append(DirEntry(name=entry.name, entry_type=_entry_type(entry)))
        return entries


def _entry_type(entry: os.DirEntry) -> EntryType:
    # Report symlinks by their own type, not their target's.
    try:
        if entry.is_symlink():
            return EntryType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryType.FILE
    except OSError as e:
        logger.debug("Cannot stat %s: %s", entry.path, e)
    return EntryType.UNKNOWN
