from abc import ABC, abstractmethod
from typing import AsyncIterator

from mathstream.stream.messages import StreamEvent


class ChunkSource(ABC):
    """Abstract producer of streamed Markdown chunks."""

    @abstractmethod
    def stream(self) -> AsyncIterator[StreamEvent]:
        ...

    @abstractmethod
    async def close(self) -> None:
        ...
