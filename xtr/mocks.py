"""
Mock implementations for testing.

These classes implement the abstract interfaces with in-memory behavior
suitable for unit testing without an installed toolchain.
"""

from typing import Optional, List, Dict
import posixpath

from .interfaces import (
    ExecutableLocatorInterface, DirectoryListerInterface, DirEntry, EntryType
)


class MockExecutableLocator(ExecutableLocatorInterface):
    """
    Mock executable locator for testing.

    Paths registered with add_executable() resolve; everything else does not.
    Every probe is recorded so tests can assert on lookup order.
    """

    def __init__(self, executables: Optional[Dict[str, str]] = None):
        self._executables: Dict[str, str] = {}
        self._calls: List[str] = []
        for path, resolved in (executables or {}).items():
            self.add_executable(path, resolved)

    def which(self, path: str) -> Optional[str]:
        self._calls.append(path)
        if not path:
            return None
        return self._executables.get(posixpath.normpath(path))

    # Test helper methods

    def add_executable(self, path: str, resolved: Optional[str] = None) -> None:
        """Make ``path`` resolvable, to ``resolved`` if given, else to itself."""
        key = posixpath.normpath(path)
        self._executables[key] = resolved or key

    def get_calls(self) -> List[str]:
        """Get list of probed paths."""
        return self._calls.copy()

    def clear_calls(self) -> None:
        self._calls.clear()


class MockDirectoryLister(DirectoryListerInterface):
    """
    In-memory directory tree for testing.

    Listing a directory that was never added raises FileNotFoundError,
    the same as a real missing directory.
    """

    def __init__(self):
        self._dirs: Dict[str, List[DirEntry]] = {}
        self._errors: Dict[str, OSError] = {}

    def list_entries(self, path: str) -> List[DirEntry]:
        key = posixpath.normpath(path)
        if key in self._errors:
            raise self._errors[key]
        if key not in self._dirs:
            raise FileNotFoundError(f"No such directory: {path}")
        return list(self._dirs[key])

    # Test helper methods

    def add_dir(self, path: str) -> None:
        """Create an empty directory (and register it in its parent)."""
        key = posixpath.normpath(path)
        self._dirs.setdefault(key, [])
        parent, name = posixpath.split(key)
        if parent and parent != key and parent in self._dirs:
            self._add_entry(parent, name, EntryType.DIRECTORY)

    def add_entry(self, path: str, name: str, entry_type: EntryType = EntryType.DIRECTORY) -> None:
        """Add an entry to the listing of ``path``, creating ``path`` if needed."""
        key = posixpath.normpath(path)
        self._dirs.setdefault(key, [])
        self._add_entry(key, name, entry_type)
        if entry_type == EntryType.DIRECTORY:
            self._dirs.setdefault(posixpath.join(key, name), [])

    def set_error(self, path: str, error: OSError) -> None:
        """Make listing ``path`` raise ``error``."""
        self._errors[posixpath.normpath(path)] = error

    def _add_entry(self, key: str, name: str, entry_type: EntryType) -> None:
        if not any(e.name == name for e in self._dirs[key]):
            self._dirs[key].append(DirEntry(name=name, entry_type=entry_type))
