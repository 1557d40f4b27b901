import asyncio
import random
from typing import AsyncIterator, Optional

from mathstream.config import MathStreamConfig
from mathstream.logging import get_logger
from mathstream.stream.base import ChunkSource
from mathstream.stream.messages import EventKind, StreamEvent
from mathstream.stream.sample import SAMPLE_MARKDOWN

logger = get_logger(__name__)


def progress_percent(sent: int, total: int) -> int:
    if total <= 0:
        return 100
    return round(sent / total * 100)


class DemoChunkSource(ChunkSource):
    """Replays a Markdown document a few characters at a time.

    Chunk sizes and delays are drawn at random from the configured ranges
    to mimic a model producing tokens.
    """

    def __init__(
        self,
        content: str = SAMPLE_MARKDOWN,
        config: Optional[MathStreamConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self._content = content
        self._config = config or MathStreamConfig()
        self._rng = rng or random.Random()
        self._closed = False

    def _next_chunk_size(self) -> int:
        low = max(1, self._config.chunk_min)
        high = max(low, self._config.chunk_max)
        return self._rng.randint(low, high)

    def _next_delay(self) -> float:
        low = max(0.0, self._config.interval_min)
        high = max(low, self._config.interval_max)
        return self._rng.uniform(low, high)

    async def stream(self) -> AsyncIterator[StreamEvent]:
        self._closed = False
        logger.debug("Demo stream started (%d characters)", len(self._content))
        yield StreamEvent(kind=EventKind.CONNECTED, message="Stream connected")

        index = 0
        total = len(self._content)
        while index < total:
            if self._closed:
                logger.debug("Demo stream closed at %d/%d", index, total)
                return
            chunk = self._content[index:index + self._next_chunk_size()]
            index += len(chunk)
            yield StreamEvent(
                kind=EventKind.CONTENT,
                content=chunk,
                progress=progress_percent(index, total),
            )
            await asyncio.sleep(self._next_delay())

        yield StreamEvent(kind=EventKind.DONE, progress=100, message="Stream complete")

    async def close(self) -> None:
        self._closed = True
