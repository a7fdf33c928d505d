"""
xpack toolchain resolver

Locates embedded build tools (cross compiler, OpenOCD, make) installed by
xpm, or configured by the user, and validates that they are executable.
"""

from .interfaces import (
    EntryType,
    DirEntry,
    ExecutableLocatorInterface,
    DirectoryListerInterface,
)

from .versions import ToolVersion, parse_version, is_real_version, compare_versions
from .definitions import (
    BuildToolDefinition,
    BUILTIN_DEFINITIONS,
    XPACKS_DEV_TOOL_PATH,
    ARM_NONE_EABI,
    OPENOCD,
    MAKE,
)
from .results import (
    ResolveStatus,
    ResolveResult,
    ToolNotFoundError,
    DirectoryMissingError,
    NoVersionFoundError,
    InvalidToolDefinitionError,
)
from .resolver import (
    ToolchainResolver,
    find_newest_version,
    validate_managed_toolchain_path,
    validate_cross_compiler_path,
    resolve_tool_path,
    locate_tool,
)

__all__ = [
    "EntryType",
    "DirEntry",
    "ExecutableLocatorInterface",
    "DirectoryListerInterface",
    "ToolVersion",
    "parse_version",
    "is_real_version",
    "compare_versions",
    "BuildToolDefinition",
    "BUILTIN_DEFINITIONS",
    "XPACKS_DEV_TOOL_PATH",
    "ARM_NONE_EABI",
    "OPENOCD",
    "MAKE",
    "ResolveStatus",
    "ResolveResult",
    "ToolNotFoundError",
    "DirectoryMissingError",
    "NoVersionFoundError",
    "InvalidToolDefinitionError",
    "ToolchainResolver",
    "find_newest_version",
    "validate_managed_toolchain_path",
    "validate_cross_compiler_path",
    "resolve_tool_path",
    "locate_tool",
]
