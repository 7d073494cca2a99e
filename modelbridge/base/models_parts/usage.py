"""Token usage DTO.

Every field is optional: ``None`` means the vendor did not report the value,
which is different from a reported zero.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Usage:
    """Token accounting for a single model call."""

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    reasoning_tokens: Optional[int] = None
    cached_input_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return only the reported counters."""
        return {k: v for k, v in asdict(self).items() if v is not None}


__all__ = ["Usage"]
