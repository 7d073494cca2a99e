"""Shared assertion helper for tests that prefer explicit AssertionError messages."""

from __future__ import annotations


def assert_true(condition: bool, message: str) -> None:
    """Raise ``AssertionError`` with ``message`` when ``condition`` is false."""
    if not condition:
        raise AssertionError(message)


__all__ = ["assert_true"]
