"""xtrctl tools / versions / locate / check."""

from __future__ import annotations

import logging
from typing import Optional

from xtr.cli.helpers import _error, _print
from xtr.config import ResolverConfig
from xtr.resolver import ToolchainResolver
from xtr.results import ResolveResult, ToolNotFoundError

logger = logging.getLogger(__name__)


def _report(tool: str, result: ResolveResult, *, json_mode: bool) -> int:
    if json_mode:
        _print({"tool": tool, **result.to_dict()}, json_mode=True)
    elif result:
        _print(result.path, json_mode=False)
    else:
        _print(f"{tool}: {result.status.value} {result.reason}".rstrip(), json_mode=False)
    return 0 if result else 1


def cmd_tools(*, config: ResolverConfig, json_mode: bool) -> int:
    definitions = config.definitions()
    if json_mode:
        _print({"tools": [d.to_dict() for d in definitions.values()]}, json_mode=True)
        return 0
    for name, d in sorted(definitions.items()):
        label = d.display_name or name
        package = d.package_name or "-"
        _print(f"{name:<16} {package:<22} {d.standard_command_name:<20} {label}", json_mode=False)
    return 0


def cmd_versions(
    tool: str,
    *,
    config: ResolverConfig,
    json_mode: bool,
    resolver: Optional[ToolchainResolver] = None,
) -> int:
    definition = config.definitions().get(tool)
    if definition is None:
        _error(f"unknown tool: {tool}", json_mode=json_mode)
        return 2
    if not config.tools_dir:
        _error("no install directory; pass --tools-dir or set XTR_TOOLS_DIR", json_mode=json_mode)
        return 2

    resolver = resolver or ToolchainResolver()
    try:
        versions = resolver.list_versions(definition, config.tools_dir)
    except ToolNotFoundError as e:
        if json_mode:
            _print({"tool": tool, **e.to_result().to_dict()}, json_mode=True)
        else:
            _print(str(e), json_mode=False)
        return 1

    if json_mode:
        _print(
            {
                "tool": tool,
                "newest": versions[0].source_name if versions else None,
                "versions": [v.to_dict() for v in versions],
            },
            json_mode=True,
        )
    elif not versions:
        _print(f"no tool found: {tool}", json_mode=False)
    else:
        for i, v in enumerate(versions):
            _print(f"{v.source_name}{'  (newest)' if i == 0 else ''}", json_mode=False)
    return 0 if versions else 1


def cmd_locate(
    tool: str,
    *,
    config: ResolverConfig,
    path: Optional[str] = None,
    json_mode: bool,
    resolver: Optional[ToolchainResolver] = None,
) -> int:
    definition = config.definitions().get(tool)
    if definition is None:
        _error(f"unknown tool: {tool}", json_mode=json_mode)
        return 2
    resolver = resolver or ToolchainResolver()
    configured = path or config.configured_path(tool)
    result = resolver.locate_tool(definition, configured_path=configured, base_path=config.tools_dir)
    return _report(tool, result, json_mode=json_mode)


def cmd_check(
    path: str,
    *,
    tool: str,
    config: ResolverConfig,
    json_mode: bool,
    resolver: Optional[ToolchainResolver] = None,
) -> int:
    definition = config.definitions().get(tool)
    if definition is None:
        _error(f"unknown tool: {tool}", json_mode=json_mode)
        return 2
    resolver = resolver or ToolchainResolver()
    if definition.is_cross_compiler:
        result = resolver.validate_cross_compiler_path(path)
    else:
        result = resolver.resolve_tool_path(path, definition)
    return _report(tool, result, json_mode=json_mode)
