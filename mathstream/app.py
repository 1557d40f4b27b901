import asyncio
import signal
import sys

from mathstream.logging import get_logger
from mathstream.stream.base import ChunkSource
from mathstream.ui.renderer import NullRenderer

logger = get_logger(__name__)


class MathStreamApp:
    """Main application: source -> events -> live render."""

    def __init__(self, source: ChunkSource, renderer=None):
        self._source = source
        self._renderer = renderer or NullRenderer()
        self._streaming = False
        self._interrupted = False

    async def run(self) -> None:
        loop = asyncio.get_event_loop()
        if sys.platform == "win32":
            signal.signal(signal.SIGINT, lambda *_: self._handle_interrupt())
        else:
            loop.add_signal_handler(signal.SIGINT, self._handle_interrupt)

        try:
            await self._consume()
        except asyncio.CancelledError:
            pass
        finally:
            if sys.platform != "win32":
                loop.remove_signal_handler(signal.SIGINT)
            self._renderer.finalize()
            await self._source.close()

    async def _consume(self) -> None:
        self._streaming = True
        self._interrupted = False
        count = 0
        try:
            async for event in self._source.stream():
                if self._interrupted:
                    break
                self._renderer.render(event)
                count += 1
        finally:
            self._streaming = False
            logger.debug("Stream ended after %d events", count)

    def _handle_interrupt(self) -> None:
        if self._streaming:
            loop = asyncio.get_event_loop()
            loop.call_soon_threadsafe(lambda: asyncio.ensure_future(self._interrupt()))

    async def _interrupt(self) -> None:
        self._interrupted = True
        self._renderer.finalize()
        await self._source.close()
        print("\n[Stream interrupted.]")
