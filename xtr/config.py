"""YAML configuration for xtr.

Example ``~/.config/xtr/config.yaml``::

    tools_dir: ~/.local/share/xtr
    paths:
      arm-none-eabi: /opt/gcc-arm/bin
      openocd: /usr/local/bin/openocd
    tools:
      - name: pyocd
        package_name: pyocd
        installed_path_suffix: bin
        standard_command_name: pyocd

Precedence for the install directory: explicit argument, then
``XTR_TOOLS_DIR``, then ``tools_dir`` from the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import yaml

from .definitions import BUILTIN_DEFINITIONS, BuildToolDefinition

logger = logging.getLogger(__name__)

CONFIG_ENV = "XTR_CONFIG"
TOOLS_DIR_ENV = "XTR_TOOLS_DIR"


class ConfigError(ValueError):
    """The config file could not be parsed."""


def default_config_path() -> str:
    """Return the config file path.

    Reads XTR_CONFIG at call time so tests can monkeypatch it.
    """
    env = os.environ.get(CONFIG_ENV)
    if env:
        return os.path.expanduser(env)
    return os.path.join(os.path.expanduser("~"), ".config", "xtr", "config.yaml")


@dataclass
class ResolverConfig:
    """Settings the resolver is run with."""
    tools_dir: Optional[str] = None
    paths: dict[str, str] = field(default_factory=dict)
    tools: dict[str, BuildToolDefinition] = field(default_factory=dict)
    source: Optional[str] = None

    def definitions(self) -> dict[str, BuildToolDefinition]:
        """Built-in definitions overlaid with the configured ones."""
        merged = dict(BUILTIN_DEFINITIONS)
        merged.update(self.tools)
        return merged

    def configured_path(self, tool_name: str) -> Optional[str]:
        path = self.paths.get(tool_name)
        return os.path.expanduser(path) if path else None


def _parse(data: object, path: str) -> ResolverConfig:
    if data is None:
        return ResolverConfig(source=path)
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file (expected mapping): {path}")

    tools_dir = data.get("tools_dir")
    if tools_dir is not None and not isinstance(tools_dir, str):
        raise ConfigError(f"{path}: tools_dir must be a string")

    raw_paths = data.get("paths") or {}
    if not isinstance(raw_paths, dict):
        raise ConfigError(f"{path}: paths must be a mapping")
    paths: dict[str, str] = {}
    for k, v in raw_paths.items():
        if v is None or v == "":
            continue
        if not isinstance(v, str):
            raise ConfigError(f"{path}: paths.{k} must be a string")
        paths[str(k)] = v

    raw_tools = data.get("tools") or []
    if not isinstance(raw_tools, list):
        raise ConfigError(f"{path}: tools must be a list")
    tools: dict[str, BuildToolDefinition] = {}
    for entry in raw_tools:
        try:
            definition = BuildToolDefinition.from_dict(entry)
        except ValueError as e:
            raise ConfigError(f"{path}: {e}") from e
        tools[definition.name] = definition

    return ResolverConfig(
        tools_dir=os.path.expanduser(tools_dir) if tools_dir else None,
        paths=paths,
        tools=tools,
        source=path,
    )


def load_config(path: Optional[str] = None, tools_dir: Optional[str] = None) -> ResolverConfig:
    """Load configuration and apply environment and explicit overrides.

    A missing file is not an error; only an explicitly given one must exist.

    Args:
        path: Config file. Defaults to default_config_path().
        tools_dir: Install directory override (e.g. from --tools-dir).

    Raises:
        ConfigError: The file is not valid YAML or has the wrong shape.
        FileNotFoundError: ``path`` was given explicitly and does not exist.
    """
    explicit = path is not None
    config_path = path or default_config_path()

    if os.path.isfile(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        config = _parse(data, config_path)
        logger.debug("Loaded config from %s", config_path)
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config = ResolverConfig()

    env_dir = os.environ.get(TOOLS_DIR_ENV)
    if env_dir:
        config.tools_dir = os.path.expanduser(env_dir)
    if tools_dir:
        config.tools_dir = os.path.expanduser(tools_dir)
    return config
