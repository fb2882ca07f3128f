"""Utilities for loading layered configuration files."""

from __future__ import annotations

import importlib.resources
import os
import tomllib
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .constants import CONFIG_MAX_SIZE, CONFIG_PATH_ENV, DEFAULT_MAX_SIZE, PROG_NAME
from .errors import ConfigLoadError

DEFAULT_CONFIG_RESOURCE = "default_config.toml"


def load_default_config() -> dict[str, Any]:
    """Return the bundled default configuration as a Python dict."""
    try:
        cfg_path = importlib.resources.files("copycat.resources").joinpath(DEFAULT_CONFIG_RESOURCE)
        with cfg_path.open("r", encoding="utf-8") as f:
            text = f.read()
    except OSError as err:  # pragma: no cover - broken installation
        msg = f"Error loading default configuration: {err}"
        raise ConfigLoadError(msg) from err
    return tomllib.loads(text)


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load a user configuration file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as err:
        msg = f"Error reading {path}: {err.strerror}"
        raise ConfigLoadError(msg) from err
    try:
        return tomlkit.loads(raw).unwrap()
    except TOMLKitError as e:
        msg = f"Error parsing {path.name}: {e}"
        raise ConfigLoadError(msg) from e


def _xdg_config_path() -> Path:
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    xdg_dir = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return xdg_dir / PROG_NAME / "config.toml"


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def read_config(*, explicit_config: Path | None = None) -> dict[str, Any]:
    """Read configuration merging multiple sources.

    Precedence (low to high):
      1. bundled defaults
      2. XDG config: $XDG_CONFIG_HOME/copycat/config.toml (or ~/.config/copycat/config.toml)
      3. $COPYCAT_CONFIG_PATH (if set and present)
      4. ``explicit_config`` (from --config)
    Tables are merged key by key; later sources override earlier ones.
    """
    cfg = load_default_config()

    xdg = _xdg_config_path()
    if xdg.exists():
        cfg = _merge(cfg, load_toml_config(xdg))

    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        p = Path(env_path)
        if p.exists():
            cfg = _merge(cfg, load_toml_config(p))

    if explicit_config:
        if not explicit_config.exists():
            msg = f"Explicit config file not found: {explicit_config}"
            raise ConfigLoadError(msg)
        cfg = _merge(cfg, load_toml_config(explicit_config))

    return cfg


def resolve_max_size(cfg: dict[str, Any], override: int | None = None) -> int:
    """Return the size ceiling, preferring ``override`` from the command line."""
    if override is not None:
        return override
    value = cfg.get(CONFIG_MAX_SIZE, DEFAULT_MAX_SIZE)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"Invalid {CONFIG_MAX_SIZE} in configuration: {value!r}"
        raise ConfigLoadError(msg)
    return value
