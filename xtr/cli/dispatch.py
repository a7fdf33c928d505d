"""Command dispatch for xtrctl CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from xtr.cli.helpers import _error
from xtr.cli.parser import _build_parser
from xtr.config import ConfigError, load_config


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``xtrctl`` CLI.

    Args:
        argv: Argument list to parse.  Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: 0 when found, 1 when not found, 2 on usage or config errors.
    """
    if argv is None:
        argv = sys.argv[1:]

    # Late import to allow tests to monkeypatch xtr.cli.cmd_xxx
    import xtr.cli as cli

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config, tools_dir=args.tools_dir)
    except (ConfigError, FileNotFoundError) as e:
        _error(str(e), json_mode=args.json)
        return 2

    if args.cmd == "tools":
        return cli.cmd_tools(config=config, json_mode=args.json)
    if args.cmd == "versions":
        return cli.cmd_versions(args.tool, config=config, json_mode=args.json)
    if args.cmd == "locate":
        return cli.cmd_locate(args.tool, config=config, path=args.path, json_mode=args.json)
    if args.cmd == "check":
        return cli.cmd_check(args.path, tool=args.tool, config=config, json_mode=args.json)

    parser.error(f"Unknown command: {args.cmd}")
    return 2
