"""Argument parser for xtrctl CLI."""

from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """Build the full argparse parser with all subcommands."""
    parser = argparse.ArgumentParser(prog="xtrctl", description="Locate xpm-installed build tools")
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.3.0 (xpack-toolchain-resolver)",
    )
    parser.add_argument("--json", action="store_true", help="Output machine-parseable JSON")
    parser.add_argument(
        "--tools-dir",
        default=None,
        help="xpm install directory (default: $XTR_TOOLS_DIR or tools_dir from config)",
    )
    parser.add_argument("--config", default=None, help="Config file (default: ~/.config/xtr/config.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log lookups to stderr")

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("tools", help="List known tool definitions")

    p_versions = sub.add_parser("versions", help="List installed versions of a tool, newest first")
    p_versions.add_argument("tool", help="Tool name (see 'xtrctl tools')")

    p_locate = sub.add_parser("locate", help="Find a tool: configured path, xpm install, then PATH")
    p_locate.add_argument("tool", help="Tool name (see 'xtrctl tools')")
    p_locate.add_argument("--path", default=None, help="Configured path to try first (overrides config)")

    p_check = sub.add_parser("check", help="Check that a path holds a usable tool executable")
    p_check.add_argument("path", help="Executable or directory to check")
    p_check.add_argument("--tool", default="arm-none-eabi", help="Tool name (default: arm-none-eabi)")

    return parser
