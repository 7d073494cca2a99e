"""
JSON Schema generation and tolerant parsing for structured output.

Schemas come from pydantic's ``TypeAdapter`` so any type pydantic can validate
(models, dataclasses, ``TypedDict``, containers) can be requested. Parsing
matches object property names case-insensitively against the target type's
fields before validation; models and providers routinely disagree on
``firstName`` versus ``FirstName``.
"""
from __future__ import annotations

import dataclasses
import json
import typing
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, TypeAdapter


@lru_cache(maxsize=256)
def _adapter(output_type: Any) -> TypeAdapter:
    return TypeAdapter(output_type)


def schema_for(output_type: Any) -> Dict[str, Any]:
    """Return the JSON Schema describing ``output_type``."""
    return _adapter(output_type).json_schema()


def schema_json(output_type: Any) -> str:
    return json.dumps(schema_for(output_type), indent=2)


def type_name(output_type: Any) -> str:
    """Short display name of ``output_type`` (``list[Person]`` stays readable)."""
    name = getattr(output_type, "__name__", None)
    if name and not typing.get_args(output_type):
        return name
    return str(output_type).replace("typing.", "")


def _field_table(tp: Any) -> Optional[Dict[str, Tuple[str, Any]]]:
    """Map folded property name to (wire key, annotation) for model-like types."""
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        table: Dict[str, Tuple[str, Any]] = {}
        for name, info in tp.model_fields.items():
            key = info.alias or name
            table.setdefault(name.casefold(), (key, info.annotation))
            table[key.casefold()] = (key, info.annotation)
        return table
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        try:
            hints = typing.get_type_hints(tp)
        except (NameError, TypeError):
            hints = {}
        return {f.name.casefold(): (f.name, hints.get(f.name, Any)) for f in dataclasses.fields(tp)}
    if typing.is_typeddict(tp):
        hints = typing.get_type_hints(tp)
        return {name.casefold(): (name, hint) for name, hint in hints.items()}
    return None


def fold_keys(tp: Any, data: Any) -> Any:
    """Rename object keys in ``data`` to the exact field names of ``tp``.

    Recurses through containers and optional wrappers. Unknown keys are kept
    untouched; when both an exact and a case-variant key are present the exact
    one wins.
    """
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is typing.Annotated:
        return fold_keys(args[0], data)
    if origin is typing.Union or type(tp).__name__ == "UnionType":
        candidates = [a for a in args if a is not type(None)]
        return fold_keys(candidates[0], data) if len(candidates) == 1 else data
    if isinstance(data, list) and origin in (list, set, frozenset, tuple, typing.Sequence, typing.List):
        if origin is tuple and args and args[-1] is not Ellipsis:
            return [fold_keys(a, d) for a, d in zip(args, data)] + data[len(args):]
        item = args[0] if args else Any
        return [fold_keys(item, d) for d in data]
    if isinstance(data, dict) and origin in (dict, typing.Dict, typing.Mapping) and len(args) == 2:
        return {k: fold_keys(args[1], v) for k, v in data.items()}
    if not isinstance(data, dict):
        return data
    table = _field_table(tp)
    if table is None:
        return data
    exact = {key for key, _ in table.values()}
    folded: Dict[str, Any] = {}
    for key, value in data.items():
        hit = table.get(key.casefold()) if isinstance(key, str) else None
        if hit is None:
            folded[key] = value
            continue
        target, annotation = hit
        if key == target or target not in data or target not in exact:
            folded[target] = fold_keys(annotation, value)
    return folded


def parse_json_as(output_type: Any, text: str) -> Any:
    """Decode ``text`` and validate it as ``output_type``.

    Raises:
        ValueError: ``json.JSONDecodeError`` or ``pydantic.ValidationError``
            (both are ``ValueError`` subclasses).
        RecursionError: ``text`` nests deeper than the decoder can follow.
    """
    data = json.loads(text)
    return _adapter(output_type).validate_python(fold_keys(output_type, data))


def validate_as(output_type: Any, data: Any) -> Any:
    """Validate already-decoded ``data`` as ``output_type``."""
    return _adapter(output_type).validate_python(fold_keys(output_type, data))


__all__ = ["schema_for", "schema_json", "type_name", "fold_keys", "parse_json_as", "validate_as"]
