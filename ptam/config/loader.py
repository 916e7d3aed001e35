"""
Configuration loader for the admin settings screen.

Handles loading configuration from JSON/YAML files and converting
to the typed ``AdminConfig`` model.
"""

from __future__ import annotations

import json
import os
import warnings
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .constants import ADMIN_URL_ENV_VAR, NAMESPACE_ENV_VAR
from .models import AdminConfig

_ENV_OVERRIDES = {
    "namespace": NAMESPACE_ENV_VAR,
    "admin_url": ADMIN_URL_ENV_VAR,
}


def parse_config_text(content: str, path: Path | str) -> Dict[str, Any]:
    """
    Parse raw configuration content from JSON or YAML.

    Args:
        content: Config file content
        path: Path or filename used for extension detection
    """
    if isinstance(path, str):
        path = Path(path)

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(content) or {}
    if suffix == ".json":
        return json.loads(content)
    raise ValueError(
        f"Unsupported config format: {suffix}. "
        f"Use .json, .yaml, or .yml"
    )


def load_raw_config(path: Path) -> Dict[str, Any]:
    """
    Load raw configuration from JSON or YAML file.

    Also loads environment variables from .env file if present.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Dictionary with raw configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported or the document is not a mapping
    """
    load_dotenv()

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = parse_config_text(path.read_text(encoding="utf-8"), path)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping at the top level: {path}")
    return raw


def build_admin_config(raw: Dict[str, Any]) -> AdminConfig:
    """
    Build AdminConfig from the ``admin`` section of raw configuration.

    A flat document (no ``admin`` key) is read as the admin section itself.
    Environment variables override file values.

    Args:
        raw: Raw config dictionary

    Returns:
        AdminConfig instance (not yet validated)
    """
    section = raw.get("admin", raw)
    if not isinstance(section, dict):
        raise ValueError("'admin' section must be a mapping")

    known = {f.name for f in fields(AdminConfig) if f.name != "config_path"}
    values: Dict[str, Any] = {}
    for key, value in section.items():
        if key not in known:
            warnings.warn(f"Ignoring unknown admin config key '{key}'.")
            continue
        if value is not None and not isinstance(value, str):
            raise ValueError(f"admin.{key} must be a string")
        values[key] = value

    for key, env_var in _ENV_OVERRIDES.items():
        env_value = os.environ.get(env_var)
        if env_value:
            values[key] = env_value

    return AdminConfig(**values)


def build_config_from_raw(raw: Dict[str, Any], path: Optional[Path | str] = None) -> AdminConfig:
    """
    Build and validate AdminConfig from raw configuration data.
    """
    config = build_admin_config(raw)
    if path is not None:
        config.config_path = Path(path).expanduser().resolve()
    config.validate()
    return config


def load_config_from_file(path: Path | str) -> AdminConfig:
    """
    Load and validate admin configuration from file.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated AdminConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If configuration is invalid

    Example:
        >>> config = load_config_from_file("ptam.yaml")
        >>> config.page_slug
        'custom-query-blocks'
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()

    raw = load_raw_config(path)
    return build_config_from_raw(raw, path)
