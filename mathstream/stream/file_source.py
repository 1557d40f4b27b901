import os
import random
from typing import AsyncIterator, Optional

from mathstream.config import MathStreamConfig
from mathstream.logging import get_logger
from mathstream.stream.base import ChunkSource
from mathstream.stream.demo_source import DemoChunkSource
from mathstream.stream.messages import EventKind, StreamEvent

logger = get_logger(__name__)


class FileChunkSource(ChunkSource):
    """Streams a Markdown file from disk with the demo pacing."""

    def __init__(
        self,
        path: str,
        config: Optional[MathStreamConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self._path = path
        self._config = config or MathStreamConfig()
        self._rng = rng
        self._inner: Optional[DemoChunkSource] = None

    async def stream(self) -> AsyncIterator[StreamEvent]:
        try:
            with open(self._path, encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            logger.debug("Cannot read %s: %s", self._path, e)
            yield StreamEvent(
                kind=EventKind.ERROR,
                message=f"Cannot read {os.path.basename(self._path)}: {e.strerror or e}",
            )
            return

        self._inner = DemoChunkSource(content, self._config, self._rng)
        async for event in self._inner.stream():
            yield event

    async def close(self) -> None:
        if self._inner is not None:
            await self._inner.close()
