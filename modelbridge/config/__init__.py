"""Configuration layer for the client.

Sources are merged in a fixed order, later sources winning:

1. Built-in defaults (``modelbridge.config.defaults``)
2. Optional config file named by ``MODELBRIDGE_CONFIG_FILE`` (JSON, else YAML)
3. ``MODELBRIDGE_<FIELD>`` environment variables, after loading ``.env``
   (path from ``DOTENV_FILE``) without overriding variables already set
4. In-code overrides passed to ``get_settings``

Example config file::

    object_mode: tool
    log_level: DEBUG
    cache_ttl_seconds: 60

The file is read once per process; ``reset_settings_cache`` forgets it and
the ``.env`` load so tests can change the environment.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .settings import Settings

ENV_PREFIX = "MODELBRIDGE_"
CONFIG_FILE_ENV = "MODELBRIDGE_CONFIG_FILE"

ENV_FIELD_MAP = {
    "object_mode": "OBJECT_MODE",
    "log_level": "LOG_LEVEL",
    "json_logs": "JSON_LOGS",
    "cache_ttl_seconds": "CACHE_TTL_SECONDS",
    "cache_max_entries": "CACHE_MAX_ENTRIES",
    "id_prefix": "ID_PREFIX",
    "id_size": "ID_SIZE",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if os.path.isfile(path):
        load_dotenv(path, override=False)
    _DOTENV_LOADED = True


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{CONFIG_FILE_ENV} must contain a mapping, got {type(data).__name__}")
    return data


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    _FILE_CACHE = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    return _FILE_CACHE


def _env_values() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        raw = os.getenv(ENV_PREFIX + suffix)
        if raw is not None and raw.strip():
            values[field] = raw.strip()
    return values


def get_settings(overrides: Optional[Mapping[str, Any]] = None) -> Settings:
    """Resolve settings from all sources.

    Raises:
        pydantic.ValidationError: When a merged value is out of range.
    """
    _load_dotenv_once()
    merged: Dict[str, Any] = {}
    merged.update(_load_external_config())
    merged.update(_env_values())
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(merged)


def reset_settings_cache() -> None:
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = ["Settings", "get_settings", "reset_settings_cache", "ENV_FIELD_MAP"]
