"""Shared configuration service for stores and platform resolution."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

_CONFIG_CACHE: Dict[str, Dict[str, Any]] = {}


def _default_config_path() -> Path:
    """Resolve the default config path (supports STORE_CONFIG_PATH override)."""
    env_path = os.getenv("STORE_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return Path(__file__).resolve().parents[4] / "config" / "config.yaml"


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    _CONFIG_CACHE.clear()


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML configuration with caching.

    Args:
        path: Optional custom path. Defaults to STORE_CONFIG_PATH or repo config.
            A missing default config yields an empty mapping; a missing
            explicit path raises FileNotFoundError.
    """
    resolved = Path(path).expanduser() if path else _default_config_path()
    if path is None and not resolved.exists():
        return {}
    key = str(resolved.resolve())
    if key not in _CONFIG_CACHE:
        with open(resolved, "r", encoding="utf-8") as f:
            _CONFIG_CACHE[key] = yaml.safe_load(f) or {}
    return _CONFIG_CACHE[key]


def _get_section(section_path: str) -> Dict[str, Any]:
    """
    Return nested configuration section by dotted path (e.g. ``stores.profile``).
    """
    config = load_config()
    section: Any = config
    for key in section_path.split("."):
        if not isinstance(section, dict):
            return {}
        section = section.get(key)
        if section is None:
            return {}
    return section if isinstance(section, dict) else {}


def get_store_settings(store_name: str) -> Dict[str, Any]:
    """Return the descriptor settings for a named store."""
    return _get_section(f"stores.{store_name}")


def get_platform_settings() -> Dict[str, Any]:
    """Return platform-directory settings (policy, editor directory, identity)."""
    return _get_section("platform")


def get_storage_settings() -> Dict[str, Any]:
    """Return local storage settings (root directory)."""
    return _get_section("storage")
