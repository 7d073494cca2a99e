"""Stream consumption guard shared by the text and object facades.

``guard_stream`` enforces the consumer side of the stream contract: the token
is polled before every pull and after every received chunk, consumption stops
at the first terminal chunk, and the source iterator is always closed.
"""
from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from .cancellation import CancellationToken, CancelledError
from .log_support import LogContext
from .logging import log_event
from .models import StreamChunk


async def guard_stream(
    chunks: AsyncIterator[StreamChunk],
    cancel: Optional[CancellationToken] = None,
    *,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> AsyncIterator[StreamChunk]:
    """Yield chunks from ``chunks`` until (and including) the terminal one.

    Raises:
        CancelledError: When ``cancel`` is observed; no terminal chunk is
            produced in that case.
    """
    iterator = chunks.__aiter__()
    emitted = 0
    try:
        while True:
            if cancel is not None:
                cancel.raise_if_cancelled()
            try:
                chunk = await iterator.__anext__()
            except StopAsyncIteration:
                return
            if cancel is not None:
                cancel.raise_if_cancelled()
            emitted += 1
            yield chunk
            if chunk.is_terminal:
                return
    except CancelledError:
        if logger is not None:
            log_event(logger, "stream.cancelled", ctx, emitted=emitted)
        raise
    finally:
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()


__all__ = ["guard_stream"]
