"""Validated settings model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .defaults import (
    DEFAULT_CACHE_MAX_ENTRIES,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_ID_PREFIX,
    DEFAULT_ID_SIZE,
    DEFAULT_JSON_LOGS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OBJECT_MODE,
)


class Settings(BaseModel):
    """Resolved configuration.

    Attributes:
        object_mode: Structured-output mode used when a call does not choose one.
        log_level: Level name for the ``modelbridge`` logger.
        json_logs: Emit JSON log lines (``False`` gives plain text).
        cache_ttl_seconds: Lifetime of cached generate results.
        cache_max_entries: Capacity of the in-memory cache store.
        id_prefix: Prefix used by ``generate_id``.
        id_size: Random part length used by ``generate_id``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    object_mode: Literal["json", "tool"] = DEFAULT_OBJECT_MODE
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = DEFAULT_JSON_LOGS
    cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, gt=0)
    cache_max_entries: int = Field(default=DEFAULT_CACHE_MAX_ENTRIES, gt=0)
    id_prefix: str = DEFAULT_ID_PREFIX
    id_size: int = Field(default=DEFAULT_ID_SIZE, gt=0)


__all__ = ["Settings"]
