from typing import Optional

from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from mathstream.stream.messages import StreamEvent


def code_panel(code: str, language: str, theme: str = "monokai") -> Panel:
    """Render a fenced code block as a cyan-bordered syntax panel."""
    body = Syntax(
        code.rstrip("\n"),
        language or "text",
        theme=theme,
        word_wrap=True,
    )
    return Panel(
        body,
        title=language or None,
        title_align="left",
        border_style="cyan",
        expand=False,
    )


def math_panel(value: str) -> Panel:
    """Render a display formula centered in a magenta-bordered panel."""
    return Panel(
        Text(value, style="math.block", justify="center"),
        border_style="magenta",
    )


def error_panel(text: str) -> Panel:
    """Render an error message as a red-bordered panel."""
    return Panel(
        Text(text, style="error"),
        title="Error",
        border_style="red",
        expand=False,
    )


def progress_footer(event: StreamEvent) -> Optional[Text]:
    """Render the final progress line. Returns None if there is nothing to show."""
    if event.progress is None and not event.message:
        return None

    parts = []
    if event.message:
        parts.append(event.message)
    if event.progress is not None:
        parts.append(f"{event.progress}%")

    return Text(" | ".join(parts), style="progress")


def status_banner(message: str) -> Text:
    """Render a dim connection status banner."""
    return Text(message or "Connected", style="banner")
