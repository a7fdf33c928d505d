"""
Interfaces for the xpack toolchain resolver.

Abstract base classes for the capabilities the resolver consumes from the
host: locating executables and listing directories. This enables
dependency injection and mock-based testing without a real toolchain install.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from dataclasses import dataclass
from enum import Enum


class EntryType(Enum):
    """Kind of a directory entry."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    UNKNOWN = "unknown"


@dataclass
class DirEntry:
    """A single (name, type) pair returned by a directory listing."""
    name: str
    entry_type: EntryType

    @property
    def is_dir(self) -> bool:
        return self.entry_type == EntryType.DIRECTORY


class ExecutableLocatorInterface(ABC):
    """
    Abstract interface for ``which``-style executable lookup.

    Implementations:
    - RealExecutableLocator: Wraps shutil.which
    - MockExecutableLocator: For unit testing without binaries
    """

    @abstractmethod
    def which(self, path: str) -> Optional[str]:
        """Return the absolute path if ``path`` is a locatable executable, else None."""
        pass


class DirectoryListerInterface(ABC):
    """
    Abstract interface for directory listing.

    Implementations:
    - RealDirectoryLister: Wraps os.scandir
    - MockDirectoryLister: In-memory tree for testing
    """

    @abstractmethod
    def list_entries(self, path: str) -> List[DirEntry]:
        """List entries of a directory. Raises OSError if it cannot be read."""
        pass
