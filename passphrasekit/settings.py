#!/usr/bin/env python3
"""
Settings loader for passphrasekit.

Defaults ship in ``passphrasekit/configs/app.yaml``. Point the
``PASSPHRASE_APP_CONFIG`` environment variable at another YAML file to
replace them wholesale (a relative path is taken from the working directory).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
APP_CONFIG_ENV = "PASSPHRASE_APP_CONFIG"

# Top-level sections app.yaml may hold, each a mapping.
SECTIONS = ("generator", "logging", "display")


def app_config_path() -> Path:
    """The app config in effect: the environment override, else the bundled file."""
    override = os.environ.get(APP_CONFIG_ENV)
    if override:
        return resolve_path(override, base=Path.cwd())
    return APP_CONFIG_PATH


@lru_cache(maxsize=4)
def _load(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"App config {path} must be a mapping, got {type(data).__name__}")
    for name in SECTIONS:
        if data.get(name) is not None and not isinstance(data[name], dict):
            raise ValueError(f"App config section '{name}' in {path} must be a mapping")
    return data


def load_app_config(path: Path | None = None) -> dict:
    """Parsed app config; cached per file."""
    return _load(Path(path) if path is not None else app_config_path())


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def get_section(name: str) -> Mapping[str, Any]:
    """A top-level section of the app config; empty if it is absent."""
    if name not in SECTIONS:
        raise KeyError(f"Unknown settings section '{name}'; expected one of {', '.join(SECTIONS)}")
    return load_app_config().get(name) or {}


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to project root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or PROJECT_ROOT) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "app_config_path",
    "get_setting",
    "get_section",
    "resolve_path",
    "PACKAGE_ROOT",
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
    "APP_CONFIG_ENV",
]
