from rich.console import Console

from mathstream.stream.messages import EventKind, StreamEvent
from mathstream.ui.components import (
    error_panel,
    progress_footer,
    status_banner,
)
from mathstream.ui.markdown_stream import StreamingMarkdown


class VisualRenderer:
    """Renders stream events to the terminal with Rich formatting."""

    def __init__(
        self,
        console: Console,
        show_progress: bool = True,
        refresh_per_second: int = 10,
        code_theme: str = "monokai",
    ):
        self._console = console
        self._show_progress = show_progress
        self._markdown = StreamingMarkdown(
            console,
            refresh_per_second=refresh_per_second,
            code_theme=code_theme,
        )

    def render(self, event: StreamEvent) -> None:
        # Finish streaming markdown before rendering non-content events
        if self._markdown.is_active and event.kind != EventKind.CONTENT:
            self._markdown.finish()

        if event.kind == EventKind.CONNECTED:
            self._console.print(status_banner(event.message))

        elif event.kind == EventKind.CONTENT:
            if not self._markdown.is_active:
                self._markdown.start()
            self._markdown.feed(event.content)

        elif event.kind == EventKind.ERROR:
            self._console.print(error_panel(event.message))

        elif event.kind == EventKind.DONE:
            if self._show_progress:
                footer = progress_footer(event)
                if footer is not None:
                    self._console.print(footer)

    def finalize(self) -> None:
        if self._markdown.is_active:
            self._markdown.finish()


class NullRenderer:
    """No-op renderer for headless runs."""

    def render(self, event: StreamEvent) -> None:
        pass

    def finalize(self) -> None:
        pass
