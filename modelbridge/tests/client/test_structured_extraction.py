from __future__ import annotations

import pytest

from modelbridge.base.errors import SchemaValidationError
from modelbridge.structured import parse_object, strip_fences, try_parse_partial


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ('```\n{"a": 1}\n```', '{"a": 1}'),
        ('  {"a": 1}  ', '{"a": 1}'),
        ('```json{"a": 1}', '{"a": 1}'),
        ('{"a": 1}```', '{"a": 1}'),
        ("", ""),
    ],
)
def test_strip_fences(raw, expected):
    assert strip_fences(raw) == expected  # nosec B101
    assert strip_fences(strip_fences(raw)) == strip_fences(raw)  # nosec B101


def test_parse_object_reports_raw_text():
    with pytest.raises(SchemaValidationError) as info:
        parse_object(dict, "not json", raw_text="```not json```")
    assert info.value.raw_text == "```not json```"  # nosec B101


def test_parse_object_rejects_null():
    with pytest.raises(SchemaValidationError):
        parse_object(dict, "null")


def test_partial_parse_returns_none_until_valid():
    assert try_parse_partial(dict, '{"a"') is None  # nosec B101
    assert try_parse_partial(dict, "   ") is None  # nosec B101
    assert try_parse_partial(dict, '{"a":1}') == {"a": 1}  # nosec B101


def test_deep_nesting_is_a_schema_validation_error():
    text = "[" * 100000
    with pytest.raises(SchemaValidationError) as info:
        parse_object(list, text)
    assert info.value.raw_text == text  # nosec B101
    assert try_parse_partial(list, text) is None  # nosec B101


def test_strip_fences_is_not_idempotent_for_stacked_json_fences():
    once = strip_fences("```json```json")
    assert once == "```json"  # nosec B101
    assert strip_fences(once) == ""  # nosec B101
