"""Build tool definitions.

A definition tells the resolver where xpm puts a tool and which
executable names to probe for it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Optional

# Directory under the xpm install root that holds the dev-tool packages.
XPACKS_DEV_TOOL_PATH = "@xpack-dev-tools"

CROSS_COMPILER_NAME = "arm-none-eabi"
CROSS_COMPILER_BINARY = "arm-none-eabi-gcc"


@dataclass(frozen=True)
class BuildToolDefinition:
    """Static description of an installable build tool."""

    name: str
    package_name: str                      # xpm package dir; "" if not xpm-managed
    installed_path_suffix: str             # path inside a version dir, e.g. "bin"
    standard_command_name: str             # e.g. "openocd"
    other_command_names: tuple[str, ...] = field(default_factory=tuple)
    display_name: Optional[str] = None

    @property
    def is_cross_compiler(self) -> bool:
        return self.name == CROSS_COMPILER_NAME

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["other_command_names"] = list(self.other_command_names)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuildToolDefinition":
        """Build a definition from a config mapping.

        Raises:
            ValueError: If a required key is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"tool definition must be a mapping, got {type(data).__name__}")
        try:
            name = data["name"]
            standard = data["standard_command_name"]
        except KeyError as e:
            raise ValueError(f"tool definition missing required key {e}") from None
        others = data.get("other_command_names") or []
        if isinstance(others, str) or not isinstance(others, list):
            raise ValueError(f"tools.{name}.other_command_names must be a list")
        return cls(
            name=str(name),
            package_name=str(data.get("package_name") or ""),
            installed_path_suffix=str(data.get("installed_path_suffix") or ""),
            standard_command_name=str(standard),
            other_command_names=tuple(str(o) for o in others),
            display_name=data.get("display_name"),
        )


ARM_NONE_EABI = BuildToolDefinition(
    name=CROSS_COMPILER_NAME,
    package_name="arm-none-eabi-gcc",
    installed_path_suffix="bin",
    standard_command_name=CROSS_COMPILER_BINARY,
    other_command_names=("arm-none-eabi-gcc.exe",),
    display_name="GNU Arm Embedded Toolchain",
)

OPENOCD = BuildToolDefinition(
    name="openocd",
    package_name="openocd",
    installed_path_suffix="bin",
    standard_command_name="openocd",
    other_command_names=("openocd.exe",),
    display_name="OpenOCD",
)

MAKE = BuildToolDefinition(
    name="make",
    package_name="windows-build-tools",
    installed_path_suffix="bin",
    standard_command_name="make",
    other_command_names=("make.exe", "mingw32-make", "mingw32-make.exe"),
    display_name="GNU Make",
)

BUILTIN_DEFINITIONS: dict[str, BuildToolDefinition] = {
    d.name: d for d in (ARM_NONE_EABI, OPENOCD, MAKE)
}


def get_definition(
    name: str, extra: Optional[dict[str, BuildToolDefinition]] = None
) -> Optional[BuildToolDefinition]:
    """Look up a definition by name; ``extra`` entries override built-ins."""
    if extra and name in extra:
        return extra[name]
    return BUILTIN_DEFINITIONS.get(name)
