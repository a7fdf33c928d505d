"""Shared utilities for xtrctl CLI commands."""

from __future__ import annotations

import json
from typing import Any


def _print(obj: Any, *, json_mode: bool) -> None:
    if json_mode:
        print(json.dumps(obj, indent=2, sort_keys=True))
    else:
        if isinstance(obj, str):
            print(obj)
        else:
            print(json.dumps(obj, indent=2, sort_keys=True))


def _error(message: str, *, json_mode: bool) -> None:
    _print({"error": message} if json_mode else f"error: {message}", json_mode=json_mode)
