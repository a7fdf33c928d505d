"""Resolver tests against a real xpm install tree on disk."""

from __future__ import annotations

import logging
import os
import sys

import pytest

from xtr import (
    ARM_NONE_EABI,
    OPENOCD,
    DirectoryMissingError,
    NoVersionFoundError,
    ResolveStatus,
    find_newest_version,
    locate_tool,
    resolve_tool_path,
    validate_cross_compiler_path,
    validate_managed_toolchain_path,
)
from xtr.implementations import RealDirectoryLister, RealExecutableLocator, _entry_type
from xtr.interfaces import EntryType


pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="relies on POSIX exec bits")


@pytest.fixture
def xpm_root(tmp_path, make_executable):
    root = tmp_path / "storage"
    pkg = root / "@xpack-dev-tools" / "openocd"
    make_executable(pkg / "0.11.0-1" / "bin" / "openocd")
    make_executable(pkg / "0.12.0-3" / "bin" / "openocd")
    (pkg / "README.md").write_text("not a version")
    (pkg / "0.0.0-9").mkdir()
    gcc = root / "@xpack-dev-tools" / "arm-none-eabi-gcc"
    make_executable(gcc / "13.2.1-1.1" / "bin" / "arm-none-eabi-gcc")
    return root


class TestRealDirectoryLister:
    def test_entry_types(self, xpm_root):
        entries = RealDirectoryLister().list_entries(str(xpm_root / "@xpack-dev-tools" / "openocd"))
        types = {e.name: e.entry_type for e in entries}
        assert types["0.12.0-3"] == EntryType.DIRECTORY
        assert types["README.md"] == EntryType.FILE

    def test_symlink_reported_as_symlink(self, tmp_path):
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real")
        types = {e.name: e.entry_type for e in RealDirectoryLister().list_entries(str(tmp_path))}
        assert types["link"] == EntryType.SYMLINK

    def test_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RealDirectoryLister().list_entries(str(tmp_path / "nope"))


class TestRealExecutableLocator:
    def test_executable_file(self, xpm_root):
        exe = str(xpm_root / "@xpack-dev-tools" / "openocd" / "0.12.0-3" / "bin" / "openocd")
        assert RealExecutableLocator().which(exe) == exe

    def test_non_executable_file(self, tmp_path):
        f = tmp_path / "plain"
        f.write_text("x")
        assert RealExecutableLocator().which(str(f)) is None

    def test_directory_is_not_executable(self, tmp_path):
        assert RealExecutableLocator().which(str(tmp_path)) is None

    def test_search_path(self, tmp_path, make_executable):
        exe = make_executable(tmp_path / "bin" / "mytool")
        locator = RealExecutableLocator(search_path=str(tmp_path / "bin"))
        assert locator.which("mytool") == exe

    def test_empty(self):
        assert RealExecutableLocator().which("") is None


class TestManagedInstallOnDisk:
    def test_newest_version(self, xpm_root):
        assert find_newest_version(OPENOCD, str(xpm_root)).source_name == "0.12.0-3"

    def test_openocd_executable(self, xpm_root):
        result = validate_managed_toolchain_path(OPENOCD, str(xpm_root))
        assert result.path == str(xpm_root / "@xpack-dev-tools" / "openocd" / "0.12.0-3" / "bin" / "openocd")

    def test_cross_compiler_directory(self, xpm_root):
        result = validate_managed_toolchain_path(ARM_NONE_EABI, str(xpm_root))
        assert result.path == str(xpm_root / "@xpack-dev-tools" / "arm-none-eabi-gcc" / "13.2.1-1.1" / "bin")

    def test_missing_vs_empty(self, tmp_path):
        with pytest.raises(DirectoryMissingError):
            find_newest_version(OPENOCD, str(tmp_path))
        (tmp_path / "@xpack-dev-tools" / "openocd").mkdir(parents=True)
        with pytest.raises(NoVersionFoundError):
            find_newest_version(OPENOCD, str(tmp_path))

    def test_newest_without_binary(self, xpm_root):
        (xpm_root / "@xpack-dev-tools" / "openocd" / "0.13.0-1").mkdir()
        result = validate_managed_toolchain_path(OPENOCD, str(xpm_root))
        assert result.status == ResolveStatus.NOT_FOUND


class TestConfiguredPathsOnDisk:
    def test_cross_compiler_binary(self, xpm_root):
        bin_dir = xpm_root / "@xpack-dev-tools" / "arm-none-eabi-gcc" / "13.2.1-1.1" / "bin"
        result = validate_cross_compiler_path(str(bin_dir / "arm-none-eabi-gcc"))
        assert result.path == str(bin_dir)

    def test_cross_compiler_directory(self, xpm_root):
        bin_dir = str(xpm_root / "@xpack-dev-tools" / "arm-none-eabi-gcc" / "13.2.1-1.1" / "bin")
        assert validate_cross_compiler_path(bin_dir).path == bin_dir

    def test_tool_directory(self, xpm_root):
        bin_dir = xpm_root / "@xpack-dev-tools" / "openocd" / "0.11.0-1" / "bin"
        assert resolve_tool_path(str(bin_dir), OPENOCD).path == str(bin_dir / "openocd")

    def test_locate_prefers_configured(self, xpm_root):
        older = str(xpm_root / "@xpack-dev-tools" / "openocd" / "0.11.0-1" / "bin" / "openocd")
        result = locate_tool(OPENOCD, configured_path=older, base_path=str(xpm_root))
        assert result.path == os.path.abspath(older)


class TestUnusablePathsOnDisk:
    def test_null_byte_base_path(self):
        result = validate_managed_toolchain_path(OPENOCD, "/tmp/x\0y")
        assert result.status == ResolveStatus.DIRECTORY_MISSING

    def test_null_byte_configured_path(self):
        assert resolve_tool_path("/opt/a\0b", OPENOCD).status == ResolveStatus.NOT_FOUND
        assert validate_cross_compiler_path("/opt/a\0b").status == ResolveStatus.NOT_FOUND


class _UnstatableEntry:
    path = "/gone/entry"

    def is_symlink(self):
        raise PermissionError("denied")


class TestEntryType:
    def test_unstatable_entry_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="xtr.implementations"):
            assert _entry_type(_UnstatableEntry()) == EntryType.UNKNOWN
        assert "/gone/entry" in caplog.text
