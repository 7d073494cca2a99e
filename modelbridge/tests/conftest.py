"""Shared fixtures for the modelbridge test suite."""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from modelbridge.config import ENV_FIELD_MAP, reset_settings_cache
from modelbridge.mock import MockLanguageModel, MockProviderFactory
from modelbridge.registry import ProviderRegistry


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep host environment and stray ``.env`` files out of every test."""
    for suffix in ENV_FIELD_MAP.values():
        monkeypatch.delenv("MODELBRIDGE_" + suffix, raising=False)
    monkeypatch.delenv("MODELBRIDGE_CONFIG_FILE", raising=False)
    monkeypatch.setenv("DOTENV_FILE", os.fspath(tmp_path / "missing.env"))
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def mock_model() -> MockLanguageModel:
    return MockLanguageModel()


@pytest.fixture()
def registry() -> ProviderRegistry:
    return ProviderRegistry([MockProviderFactory("mock")])
