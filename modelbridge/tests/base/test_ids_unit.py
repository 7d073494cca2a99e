from __future__ import annotations

import pytest

from modelbridge.base.utils.ids import ALPHABET, generate_id, generate_simple_id


def test_generate_id_has_prefix_and_size():
    value = generate_id()
    prefix, _, suffix = value.partition("-")
    assert prefix == "aitxt" and len(suffix) == 24  # nosec B101
    assert set(suffix) <= set(ALPHABET)  # nosec B101


def test_generate_id_without_prefix_and_uniqueness():
    assert len(generate_id("", 10)) == 10  # nosec B101
    assert len({generate_simple_id(16) for _ in range(200)}) == 200  # nosec B101


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        generate_simple_id(0)


def test_defaults_follow_settings(monkeypatch):
    monkeypatch.setenv("MODELBRIDGE_ID_PREFIX", "call")
    monkeypatch.setenv("MODELBRIDGE_ID_SIZE", "8")
    prefix, _, suffix = generate_id().partition("-")
    assert prefix == "call" and len(suffix) == 8  # nosec B101
    assert len(generate_simple_id()) == 8  # nosec B101
