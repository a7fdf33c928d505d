"""
xtrctl: command line for the xpack toolchain resolver.

Main commands:
- tools: List known tool definitions
- versions: List installed xpm versions of a tool
- locate: Find a tool (configured path, xpm install, host PATH)
- check: Validate a user-supplied tool path

Entry points:
- xtrctl: Main CLI entry point (installed via pip)
- Can also be imported and called programmatically via main(argv)
"""

from __future__ import annotations

from xtr.cli.helpers import _print
from xtr.cli.tool_cmds import cmd_check, cmd_locate, cmd_tools, cmd_versions
from xtr.cli.dispatch import main

__all__ = [
    "_print",
    "cmd_check",
    "cmd_locate",
    "cmd_tools",
    "cmd_versions",
    "main",
]
