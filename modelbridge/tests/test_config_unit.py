from __future__ import annotations

import json
import os

import pytest
from pydantic import ValidationError

from modelbridge.config import get_settings, reset_settings_cache
from modelbridge.config.defaults import DEFAULT_CACHE_TTL_SECONDS, DEFAULT_OBJECT_MODE


def test_defaults_apply_without_sources():
    settings = get_settings()
    assert settings.object_mode == DEFAULT_OBJECT_MODE  # nosec B101
    assert settings.cache_ttl_seconds == DEFAULT_CACHE_TTL_SECONDS  # nosec B101


def test_env_overrides_file_and_overrides_win(monkeypatch, tmp_path):
    cfg = tmp_path / "modelbridge.json"
    cfg.write_text(json.dumps({"object_mode": "tool", "cache_max_entries": 5, "log_level": "DEBUG"}), encoding="utf-8")
    monkeypatch.setenv("MODELBRIDGE_CONFIG_FILE", str(cfg))
    monkeypatch.setenv("MODELBRIDGE_CACHE_MAX_ENTRIES", "7")
    reset_settings_cache()

    settings = get_settings()
    assert settings.object_mode == "tool"  # nosec B101
    assert settings.cache_max_entries == 7  # nosec B101
    assert settings.log_level == "DEBUG"  # nosec B101
    assert get_settings({"object_mode": "json"}).object_mode == "json"  # nosec B101


def test_yaml_config_file(monkeypatch, tmp_path):
    cfg = tmp_path / "modelbridge.yaml"
    cfg.write_text("object_mode: tool\ncache_ttl_seconds: 60\n", encoding="utf-8")
    monkeypatch.setenv("MODELBRIDGE_CONFIG_FILE", str(cfg))
    reset_settings_cache()
    settings = get_settings()
    assert settings.object_mode == "tool" and settings.cache_ttl_seconds == 60  # nosec B101


def test_dotenv_does_not_override_real_env(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MODELBRIDGE_OBJECT_MODE=tool\nMODELBRIDGE_ID_SIZE=12\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.setenv("MODELBRIDGE_ID_SIZE", "30")
    reset_settings_cache()
    try:
        settings = get_settings()
        assert settings.object_mode == "tool"  # nosec B101
        assert settings.id_size == 30  # nosec B101
    finally:
        os.environ.pop("MODELBRIDGE_OBJECT_MODE", None)


def test_invalid_values_fail_validation(monkeypatch):
    monkeypatch.setenv("MODELBRIDGE_OBJECT_MODE", "xml")
    with pytest.raises(ValidationError):
        get_settings()
