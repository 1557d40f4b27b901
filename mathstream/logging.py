"""Logging utilities."""

from __future__ import annotations

import collections
import logging

from rich.console import Console
from rich.logging import RichHandler


class _DuplicateFilter(logging.Filter):
    """Drop records whose logger, level and message were already emitted.

    Streaming re-renders the whole buffer on every chunk, so the same
    diagnostic would otherwise repeat once per chunk.
    """

    def __init__(self, capacity: int = 256) -> None:
        super().__init__()
        self._seen: collections.OrderedDict[tuple, None] = collections.OrderedDict()
        self._capacity = capacity

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        key = (record.name, record.levelno, record.getMessage())
        if key in self._seen:
            self._seen.move_to_end(key)
            return False
        self._seen[key] = None
        if len(self._seen) > self._capacity:
            self._seen.popitem(last=False)
        return True


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
        console: Console the handler writes to. Pass the UI console so log
            lines are drawn above a running live display. A later call with
            a console moves the installed handler onto it.
    """

    formatter = logging.Formatter(fmt="%(name)s: %(message)s", datefmt="%H:%M:%S")

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Repeated calls reuse the installed handler
    existing = [h for h in root.handlers if isinstance(h, RichHandler)]
    if not existing:
        handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
        )
        handler.setFormatter(formatter)
        handler.addFilter(_DuplicateFilter())
        root.addHandler(handler)
    else:
        for h in existing:
            h.setFormatter(formatter)
            if console is not None:
                h.console = console
            if not any(isinstance(f, _DuplicateFilter) for f in h.filters):
                h.addFilter(_DuplicateFilter())


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
