"""Shared pytest fixtures for xtr tests."""

from __future__ import annotations

import os
import stat

import pytest

from xtr.definitions import XPACKS_DEV_TOOL_PATH
from xtr.interfaces import EntryType
from xtr.mocks import MockDirectoryLister, MockExecutableLocator
from xtr.resolver import ToolchainResolver

# Keep in sync with BASE in the test modules.
XPM_BASE = "/home/user/.xtr"


@pytest.fixture
def locator():
    return MockExecutableLocator()


@pytest.fixture
def lister():
    return MockDirectoryLister()


@pytest.fixture
def resolver(locator, lister):
    return ToolchainResolver(locator=locator, lister=lister)


@pytest.fixture
def add_versions(lister):
    """Register version directories for a package in the mock lister.

    Returns the package directory.
    """
    def _add(package: str, *names: str, base: str = XPM_BASE) -> str:
        tool_dir = os.path.join(base, XPACKS_DEV_TOOL_PATH, package)
        lister.add_dir(tool_dir)
        for name in names:
            lister.add_entry(tool_dir, name, EntryType.DIRECTORY)
        return tool_dir
    return _add


@pytest.fixture
def make_executable():
    """Create an executable file at a pathlib.Path; returns it as str."""
    def _make(path) -> str:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(path)
    return _make
