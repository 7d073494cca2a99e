"""Typed results produced by structured-output generation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, Sequence, TypeVar

from .finish_reason import FinishReason
from .usage import Usage

T = TypeVar("T")


@dataclass(frozen=True)
class GenerateObjectResult(Generic[T]):
    """A parsed object together with the raw text it was parsed from."""

    object: T
    finish_reason: FinishReason
    usage: Usage = field(default_factory=Usage)
    raw_text: Optional[str] = None
    warnings: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class ObjectChunk(Generic[T]):
    """One step of a structured stream.

    Intermediate chunks carry a best-effort partial ``object`` (``None`` when
    the accumulated text does not parse yet). Exactly one chunk per stream has
    ``is_complete`` set; it carries the final object or an ``error``.
    """

    accumulated_text: str
    object: Optional[T] = None
    delta: Optional[str] = None
    is_complete: bool = False
    error: Optional[str] = None
    usage: Optional[Usage] = None


__all__ = ["GenerateObjectResult", "ObjectChunk"]
