"""Toolchain path resolution.

Finds build tools installed by xpm under a base directory::

    <base>/@xpack-dev-tools/<package>/<version dir>/<suffix>/<command>

and validates user-configured tool paths. Every lookup goes through an
injected executable locator and directory lister, so tests run against
in-memory fakes (see ``xtr.mocks``).
"""

from __future__ import annotations

import functools
import logging
import os
from typing import Optional, Union

from .definitions import XPACKS_DEV_TOOL_PATH, CROSS_COMPILER_BINARY, BuildToolDefinition
from .implementations import RealDirectoryLister, RealExecutableLocator
from .interfaces import DirEntry, DirectoryListerInterface, ExecutableLocatorInterface
from .results import (
    DirectoryMissingError,
    InvalidToolDefinitionError,
    NoVersionFoundError,
    ResolveResult,
    ResolveStatus,
    ToolNotFoundError,
)
from .versions import ToolVersion, compare_versions, is_real_version, parse_version

logger = logging.getLogger(__name__)

PathInput = Union[str, bool, None]


def _join(*parts: str) -> str:
    return os.path.normpath(os.path.join(*parts))


def check_settings_path(value: PathInput) -> Optional[str]:
    """Return ``value`` if it is a non-empty string, else None."""
    if isinstance(value, str) and value != "":
        return value
    return None


def get_tool_base_path(tool: BuildToolDefinition, base_path: str) -> str:
    """Directory holding all installed versions of ``tool``.

    e.g. ``<base>/@xpack-dev-tools/openocd``
    """
    return _join(base_path, XPACKS_DEV_TOOL_PATH, tool.package_name)


class ToolchainResolver:
    """
    Locates build tool executables.

    Args:
        locator: ``which``-style lookup. Defaults to RealExecutableLocator.
        lister: Directory listing. Defaults to RealDirectoryLister.
    """

    def __init__(
        self,
        locator: Optional[ExecutableLocatorInterface] = None,
        lister: Optional[DirectoryListerInterface] = None,
    ):
        self._locator = locator or RealExecutableLocator()
        self._lister = lister or RealDirectoryLister()

    def _which(self, path: str) -> Optional[str]:
        try:
            resolved = self._locator.which(path)
        except (OSError, ValueError) as e:
            logger.debug("which(%s) failed: %s", path, e)
            return None
        logger.debug("which(%s) -> %s", path, resolved)
        return check_settings_path(resolved)

    # -- newest version -------------------------------------------------

    def list_tool_version_dirs(self, tool: BuildToolDefinition, base_path: str) -> list[DirEntry]:
        """List the entries of the tool's xpm install directory.

        Raises:
            InvalidToolDefinitionError: The tool has no xpm package name.
            DirectoryMissingError: The directory could not be read.
        """
        if not tool.package_name:
            raise InvalidToolDefinitionError(tool.name, "not an xpm package")
        tool_dir = get_tool_base_path(tool, base_path)
        try:
            return self._lister.list_entries(tool_dir)
        except (OSError, ValueError) as e:
            logger.warning("Cannot read %s: %s", tool_dir, e)
            raise DirectoryMissingError(tool.name, f"cannot read {tool_dir}") from e

    def list_versions(self, tool: BuildToolDefinition, base_path: str) -> list[ToolVersion]:
        """All real versions installed for ``tool``, newest first."""
        versions = [
            parse_version(entry.name)
            for entry in self.list_tool_version_dirs(tool, base_path)
            if entry.is_dir
        ]
        versions = [v for v in versions if is_real_version(v)]
        versions.sort(key=lambda v: (v.tool_version, v.xpm_version), reverse=True)
        return versions

    def find_newest_version(self, tool: BuildToolDefinition, base_path: str) -> ToolVersion:
        """Pick the newest version directory of an xpm-installed tool.

        Only directory entries count; files are ignored whatever their name.

        Raises:
            DirectoryMissingError: The tool directory could not be read.
            NoVersionFoundError: No entry parsed as a real version.
            InvalidToolDefinitionError: The tool has no xpm package name.
        """
        entries = self.list_tool_version_dirs(tool, base_path)
        newest = functools.reduce(
            compare_versions,
            (parse_version(entry.name) for entry in entries if entry.is_dir),
            None,
        )
        if newest is None or not is_real_version(newest):
            raise NoVersionFoundError(tool.name, f"no version directory in {get_tool_base_path(tool, base_path)}")
        return newest

    # -- path validation ------------------------------------------------

    def validate_managed_toolchain_path(self, tool: BuildToolDefinition, base_path: PathInput) -> ResolveResult:
        """Resolve the newest xpm install of ``tool``.

        Returns the executable path, except for the cross compiler, whose
        consumers want the containing ``bin`` directory.
        """
        base = check_settings_path(base_path)
        if base is None:
            return ResolveResult.invalid("no install directory given")
        try:
            newest = self.find_newest_version(tool, base)
        except ToolNotFoundError as e:
            logger.debug("%s", e)
            return e.to_result()

        tool_path = _join(get_tool_base_path(tool, base), newest.source_name, tool.installed_path_suffix)
        full_path = _join(tool_path, tool.standard_command_name)
        resolved = self._which(full_path)
        if resolved is None:
            return ResolveResult.not_found(f"{full_path} is not executable")
        if tool.is_cross_compiler:
            logger.info("Found %s %s in %s", tool.name, newest, tool_path)
            return ResolveResult.found(tool_path)
        logger.info("Found %s %s at %s", tool.name, newest, resolved)
        return ResolveResult.found(resolved)

    def validate_cross_compiler_path(self, candidate: PathInput) -> ResolveResult:
        """Validate a user-configured cross-compiler location.

        ``candidate`` may be the compiler binary itself, in which case its
        directory is returned, or the directory holding it, which is
        returned unchanged.
        """
        path = check_settings_path(candidate)
        if path is None:
            return ResolveResult.invalid(f"not a path: {candidate!r}")

        immediate = self._which(path)
        if immediate is not None:
            return ResolveResult.found(os.path.dirname(_join(immediate)))

        if self._which(_join(path, CROSS_COMPILER_BINARY)) is not None:
            return ResolveResult.found(path)
        return ResolveResult.not_found(f"no {CROSS_COMPILER_BINARY} at {path}")

    def resolve_tool_path(self, candidate: PathInput, definition: BuildToolDefinition) -> ResolveResult:
        """Validate a user-configured path for ``definition``.

        Probes the path itself, then ``<path>/<standard command>``, then
        every alternate command name. All alternates are probed and the
        last one that resolves wins.
        """
        path = check_settings_path(candidate)
        if path is None:
            return ResolveResult.invalid(f"not a path: {candidate!r}")

        resolved = self._which(path)
        if resolved is not None:
            return ResolveResult.found(resolved)

        resolved = self._which(_join(path, definition.standard_command_name))
        if resolved is not None:
            return ResolveResult.found(resolved)

        alternate = None
        for command in definition.other_command_names:
            hit = self._which(_join(path, command))
            if hit is not None:
                alternate = hit
        if alternate is not None:
            return ResolveResult.found(alternate)
        return ResolveResult.not_found(f"no {definition.name} executable at {path}")

    def find_on_path(self, definition: BuildToolDefinition) -> ResolveResult:
        """Look the tool's command names up on the host PATH."""
        if definition.is_cross_compiler:
            return self.validate_cross_compiler_path(definition.standard_command_name)
        for command in (definition.standard_command_name, *definition.other_command_names):
            resolved = self._which(command)
            if resolved is not None:
                return ResolveResult.found(resolved)
        return ResolveResult.not_found(f"{definition.standard_command_name} not on PATH")

    def locate_tool(
        self,
        definition: BuildToolDefinition,
        configured_path: PathInput = None,
        base_path: PathInput = None,
    ) -> ResolveResult:
        """Find a tool the way the host looks it up.

        Order: the configured path, the newest xpm install under
        ``base_path``, then the host PATH. If nothing is found the first
        negative result more specific than NOT_FOUND is returned, so a
        broken configured path or missing install directory is reported.
        """
        attempts: list[ResolveResult] = []

        if check_settings_path(configured_path) is not None:
            if definition.is_cross_compiler:
                result = self.validate_cross_compiler_path(configured_path)
            else:
                result = self.resolve_tool_path(configured_path, definition)
            if result:
                return result
            attempts.append(result)

        if check_settings_path(base_path) is not None and definition.package_name:
            result = self.validate_managed_toolchain_path(definition, base_path)
            if result:
                return result
            attempts.append(result)

        result = self.find_on_path(definition)
        if result:
            return result
        attempts.append(result)

        for attempt in attempts:
            if attempt.status != ResolveStatus.NOT_FOUND:
                return attempt
        return ResolveResult.not_found("; ".join(a.reason for a in attempts if a.reason))


def _default_resolver() -> ToolchainResolver:
    return ToolchainResolver()


def find_newest_version(tool: BuildToolDefinition, base_path: str) -> ToolVersion:
    return _default_resolver().find_newest_version(tool, base_path)


def validate_managed_toolchain_path(tool: BuildToolDefinition, base_path: PathInput) -> ResolveResult:
    return _default_resolver().validate_managed_toolchain_path(tool, base_path)


def validate_cross_compiler_path(candidate: PathInput) -> ResolveResult:
    return _default_resolver().validate_cross_compiler_path(candidate)


def resolve_tool_path(candidate: PathInput, definition: BuildToolDefinition) -> ResolveResult:
    return _default_resolver().resolve_tool_path(candidate, definition)


def locate_tool(
    definition: BuildToolDefinition,
    configured_path: PathInput = None,
    base_path: PathInput = None,
) -> ResolveResult:
    return _default_resolver().locate_tool(definition, configured_path, base_path)
