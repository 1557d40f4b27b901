from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from mathstream.render.renderer import TreeRenderer
from mathstream.tree.hast import parse_markdown
from mathstream.ui.rich_builder import RichViewBuilder


class StreamingMarkdown:
    """Accumulates text chunks and re-renders the whole buffer on each one."""

    def __init__(
        self,
        console: Console,
        refresh_per_second: int = 10,
        code_theme: str = "monokai",
    ):
        self._console = console
        self._refresh_per_second = refresh_per_second
        self._renderer = TreeRenderer(RichViewBuilder(code_theme=code_theme))
        self._buffer = ""
        self._live: Live | None = None

    def start(self) -> None:
        self._buffer = ""
        self._live = Live(
            Text(""),
            console=self._console,
            refresh_per_second=self._refresh_per_second,
        )
        self._live.start()

    def feed(self, text: str) -> None:
        self._buffer += text
        if self._live is not None:
            self._live.update(self.render())

    def render(self) -> RenderableType:
        """Parse and render the current buffer from scratch."""
        return self._renderer.render(parse_markdown(self._buffer))

    def finish(self) -> None:
        if self._live is not None:
            self._live.update(self.render(), refresh=True)
            self._live.stop()
            self._live = None
        self._buffer = ""

    @property
    def text(self) -> str:
        return self._buffer

    @property
    def is_active(self) -> bool:
        return self._live is not None
