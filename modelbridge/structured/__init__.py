"""Structured-output helpers: request construction and tolerant parsing."""

from .extraction import parse_object, strip_fences, try_parse_partial
from .requests import ObjectRequest, build_object_request

__all__ = ["strip_fences", "parse_object", "try_parse_partial", "ObjectRequest", "build_object_request"]
