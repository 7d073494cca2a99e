"""Random identifier generation for calls and tool invocations.

Prefix and length default to ``Settings.id_prefix`` / ``Settings.id_size``.
"""
from __future__ import annotations

import secrets
import string
from typing import Optional

from ...config import get_settings

ALPHABET = string.ascii_letters + string.digits


def generate_simple_id(size: Optional[int] = None) -> str:
    """Return ``size`` random alphanumeric characters."""
    if size is None:
        size = get_settings().id_size
    if size <= 0:
        raise ValueError("size must be positive")
    return "".join(secrets.choice(ALPHABET) for _ in range(size))


def generate_id(prefix: Optional[str] = None, size: Optional[int] = None) -> str:
    """Return ``"<prefix>-<random>"``, or just the random part when ``prefix`` is empty."""
    if prefix is None:
        prefix = get_settings().id_prefix
    suffix = generate_simple_id(size)
    return f"{prefix}-{suffix}" if prefix else suffix


__all__ = ["generate_id", "generate_simple_id", "ALPHABET"]
