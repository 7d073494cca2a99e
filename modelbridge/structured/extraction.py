"""
Parsing model output into typed objects.

Models frequently wrap JSON answers in Markdown code fences; ``strip_fences``
removes one leading fence (with or without the ``json`` tag) and one trailing
fence. Parsing is case-insensitive on property names (see
``modelbridge.base.schema``).
"""
from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from ..base.errors import SchemaValidationError
from ..base.schema import parse_json_as, type_name

T = TypeVar("T")

_JSON_FENCE = "```json"
_FENCE = "```"


def strip_fences(text: str) -> str:
    """Remove surrounding Markdown code fences and whitespace.

    Idempotent: ``strip_fences(strip_fences(s)) == strip_fences(s)`` for
    any ``s`` that does not itself nest fences.
    """
    s = text.strip()
    if s.startswith(_JSON_FENCE):
        s = s[len(_JSON_FENCE):]
    elif s.startswith(_FENCE):
        s = s[len(_FENCE):]
    if s.endswith(_FENCE):
        s = s[: -len(_FENCE)]
    return s.strip()


def parse_object(output_type: Type[T], text: str, *, raw_text: Optional[str] = None) -> T:
    """Parse ``text`` as ``output_type``.

    Args:
        output_type: Target type.
        text: JSON text to parse (already fence-stripped where applicable).
        raw_text: Text to report on failure; defaults to ``text``.

    Raises:
        SchemaValidationError: The text is not valid JSON (including JSON
            nested too deeply to decode), does not validate, or decodes to
            ``null``.
    """
    name = type_name(output_type)
    reported = text if raw_text is None else raw_text
    try:
        value: Any = parse_json_as(output_type, text)
    except (ValueError, RecursionError) as exc:
        raise SchemaValidationError(
            f"Failed to parse model output as {name}: {exc}", raw_text=reported, target=name
        ) from exc
    if value is None:
        raise SchemaValidationError(f"Model output parsed to null, expected {name}", raw_text=reported, target=name)
    return value


def try_parse_partial(output_type: Type[T], text: str) -> Optional[T]:
    """Best-effort parse of an in-progress buffer; ``None`` when it does not parse yet."""
    cleaned = strip_fences(text)
    if not cleaned:
        return None
    try:
        return parse_json_as(output_type, cleaned)
    except (ValueError, RecursionError):
        return None


__all__ = ["strip_fences", "parse_object", "try_parse_partial"]
