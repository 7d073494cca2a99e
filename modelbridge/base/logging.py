"""Structured logging utilities for the client layer.

All library loggers live under the ``modelbridge`` logger, which owns one
console handler (JSON by default). Child loggers obtained via ``get_logger``
propagate to it. Level and output format come from ``Settings.log_level`` and
``Settings.json_logs`` (config file, ``MODELBRIDGE_LOG_LEVEL`` /
``MODELBRIDGE_JSON_LOGS``), resolved each time a logger is requested so tests
and long-running hosts can adjust them.

Events are emitted as single JSON objects via ``log_event``;
``normalized_log_event`` guarantees the canonical keys ``structured``,
``phase``, ``attempt``, ``emitted`` and ``tokens`` are present.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..config import get_settings
from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "modelbridge"

_BASE_LOGGER_ATTR = "_modelbridge_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_modelbridge_console_handler"
_FILE_HANDLER_ATTR = "_modelbridge_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name (case-insensitive) to its constant; unknown names give ``default``."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _configured() -> Tuple[int, bool]:
    settings = get_settings()
    return _parse_level(settings.log_level), settings.json_logs


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _console_handler(level: int, json_mode: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = level
    if not getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        logger.handlers[:] = [_console_handler(desired_level, json_mode)]
        logger.propagate = False
        setattr(logger, _BASE_LOGGER_ATTR, True)
        return logger

    logger.setLevel(desired_level)
    for existing in list(logger.handlers):
        if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
            continue
        stream_obj = getattr(existing, "stream", None)
        if stream_obj is None or getattr(stream_obj, "closed", False):
            logger.removeHandler(existing)
            logger.addHandler(_console_handler(desired_level, json_mode))
            continue
        existing.setLevel(desired_level)
        # Follow sys.stderr when it was swapped (pytest capture, daemonization).
        if isinstance(existing, logging.StreamHandler) and existing.stream is not sys.stderr:
            existing.setStream(sys.stderr)
        if json_mode != isinstance(existing.formatter, JsonFormatter):
            existing.setFormatter(_formatter(json_mode))
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME, json_mode: Optional[bool] = None, level: Optional[int] = None
) -> logging.Logger:
    """Return ``name`` as a child of the configured ``modelbridge`` logger.

    ``json_mode`` and ``level`` default to the resolved settings.
    """
    configured_level, configured_json = _configured()
    json_mode = configured_json if json_mode is None else json_mode
    level = configured_level if level is None else level
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: Union[int, str, None] = None,
    file_path: Optional[str] = None,
    json_mode: Optional[bool] = None,
    logger_name: str = BASE_LOGGER_NAME,
) -> logging.Logger:
    """Adjust level and the managed rotating file handler at runtime.

    Passing ``file_path=None`` removes a previously attached managed file
    handler; handlers added by the host application are left untouched.
    """
    if json_mode is None:
        json_mode = get_settings().json_logs
    logger = get_logger(logger_name, json_mode=json_mode)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for handler in logger.handlers:
            handler.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for handler in managed:
            logger.removeHandler(handler)
            handler.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    existing: Optional[logging.FileHandler] = None
    for handler in managed:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == abs_path:
            existing = handler
        else:
            logger.removeHandler(handler)
            handler.close()

    if existing is None:
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit ``event`` as one JSON object merged with ``ctx`` and ``fields``.

    ``None`` values are dropped unless ``keep_none`` is set.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("structured", "phase", "attempt", "emitted", "tokens")


def _coerce_tokens(tokens: Any) -> Any:
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    phase: str,
    attempt: Optional[int] = None,
    error_code: Optional[str] = None,
    emitted: Optional[bool] = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit ``event`` with the canonical key set.

    ``error_code`` is only included when set. Extra fields never overwrite the
    canonical keys.
    """
    fields: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or fields.get(k) is not None:
            continue
        fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
]
