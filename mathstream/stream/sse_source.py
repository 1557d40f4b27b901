import asyncio
import json
import sys
from typing import AsyncIterator, Callable, Optional

from mathstream.logging import get_logger
from mathstream.stream.base import ChunkSource
from mathstream.stream.messages import EventKind, StreamEvent

logger = get_logger(__name__)

_KINDS = {kind.value: kind for kind in EventKind}


def parse_event_payload(data: dict) -> Optional[StreamEvent]:
    """Turn one decoded ``data:`` payload into a StreamEvent.

    Payloads look like ``{"type": "content", "content": "...", "progress": 42}``.
    Unknown types are ignored.
    """
    kind = _KINDS.get(data.get("type", ""))
    if kind is None:
        return None

    progress = data.get("progress")
    return StreamEvent(
        kind=kind,
        content=data.get("content", "") if kind == EventKind.CONTENT else "",
        progress=progress if isinstance(progress, int) else None,
        message=data.get("message", ""),
        raw=data,
    )


def parse_sse_line(line: str) -> Optional[StreamEvent]:
    """Parse a single Server-Sent Events line; only ``data:`` lines count."""
    line = line.rstrip("\r\n")
    if not line.startswith("data:"):
        return None

    payload = line[len("data:"):].strip()
    if not payload:
        return None
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        logger.debug("Skipping undecodable SSE payload: %r", payload)
        return None
    if not isinstance(data, dict):
        return None
    return parse_event_payload(data)


class SSEChunkSource(ChunkSource):
    """Reads an SSE stream line by line, e.g. ``curl -N ... | mathstream --sse``."""

    def __init__(self, read_line: Optional[Callable[[], str]] = None):
        self._read_line = read_line or sys.stdin.readline
        self._closed = False

    async def stream(self) -> AsyncIterator[StreamEvent]:
        self._closed = False
        loop = asyncio.get_event_loop()
        while not self._closed:
            line = await loop.run_in_executor(None, self._read_line)
            if not line:
                break
            event = parse_sse_line(line)
            if event is None:
                continue
            yield event
            if event.kind == EventKind.DONE:
                break

    async def close(self) -> None:
        self._closed = True
