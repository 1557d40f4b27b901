from dataclasses import dataclass, field
from typing import Union

from rich import box
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text

from mathstream.render.builder import ViewBuilder
from mathstream.ui.components import code_panel, math_panel

INLINE_STYLES = {
    "strong": "bold",
    "b": "bold",
    "em": "italic",
    "i": "italic",
    "s": "strike",
    "del": "strike",
    "code": "markdown.code",
    "a": "markdown.link",
    "span": "",
    "sup": "",
    "sub": "",
    "kbd": "markdown.code",
    "u": "underline",
    "mark": "reverse",
    "small": "dim",
}

HEADINGS = {"h1", "h2", "h3", "h4", "h5", "h6"}

Inline = Union[str, Text]


def is_inline(child) -> bool:
    return isinstance(child, (str, Text))


@dataclass
class BlockText:
    """A Text that occupies its own block, such as a paragraph or heading."""

    text: Text

    def __rich__(self) -> Text:
        return self.text


@dataclass
class TableCell:
    content: RenderableType
    header: bool = False
    align: str = "left"

    def __rich__(self) -> RenderableType:
        return self.content


@dataclass
class TableRow:
    cells: list[TableCell] = field(default_factory=list)

    @property
    def is_header(self) -> bool:
        return bool(self.cells) and all(c.header for c in self.cells)

    def __rich__(self) -> RenderableType:
        return Group(*(c.content for c in self.cells))


@dataclass
class TableSection:
    rows: list[TableRow] = field(default_factory=list)

    def __rich__(self) -> RenderableType:
        return Group(*self.rows)


class RichViewBuilder(ViewBuilder):
    """Builds rich renderables for the live terminal display.

    Inline content is collected into ``Text`` objects; block content becomes
    groups, panels, grids and tables.
    """

    def __init__(self, code_theme: str = "monokai"):
        self._code_theme = code_theme

    def element(self, tag: str, properties: dict, children: list) -> RenderableType:
        if tag in INLINE_STYLES:
            return self._inline_element(tag, properties, children)

        elif tag in HEADINGS:
            text = self._text(children)
            text.stylize(f"markdown.{tag}")
            if tag == "h1":
                text.justify = "center"
            return BlockText(text)

        elif tag in ("ul", "ol"):
            return self._list(tag, properties, children)

        elif tag == "blockquote":
            return Padding(
                Group(*self._blocks(children)),
                (0, 0, 0, 2),
                style="markdown.block_quote",
            )

        elif tag == "hr":
            return Rule(style="markdown.hr")

        elif tag == "br":
            return Text("\n")

        elif tag == "img":
            alt = properties.get("alt") or properties.get("src", "")
            return Text(f"[image: {alt}]", style="dim")

        elif tag == "pre":
            text = self._text(children)
            text.no_wrap = True
            text.stylize("markdown.code_block")
            return BlockText(text)

        elif tag in ("th", "td"):
            content = self._text(children) if all(map(is_inline, children)) else Group(*self._blocks(children))
            return TableCell(content, header=tag == "th", align=properties.get("align") or "left")

        elif tag == "tr":
            return TableRow([c for c in children if isinstance(c, TableCell)])

        elif tag in ("thead", "tbody", "tfoot"):
            return TableSection([c for c in children if isinstance(c, TableRow)])

        elif tag == "table":
            return self._table(children)

        if all(map(is_inline, children)):
            return BlockText(self._text(children))
        return Group(*self._blocks(children))

    def code_block(self, code: str, language: str) -> RenderableType:
        return code_panel(code, language, theme=self._code_theme)

    def math_formula(self, value: str, inline: bool) -> RenderableType:
        if inline:
            return Text(value, style="math.inline")
        return math_panel(value)

    def container(self, children: list) -> RenderableType:
        blocks = self._blocks(children)
        spaced: list[RenderableType] = []
        for block in blocks:
            if spaced:
                spaced.append(Text(""))
            spaced.append(block)
        return Group(*spaced)

    def _text(self, children: list[Inline]) -> Text:
        return Text.assemble(*children)

    def _inline_element(self, tag: str, properties: dict, children: list) -> RenderableType:
        if not all(map(is_inline, children)):
            return Group(*self._blocks(children))

        text = self._text(children)
        style = INLINE_STYLES[tag]
        if style:
            text.stylize(style)
        if tag == "a" and properties.get("href"):
            text.stylize(Style(link=properties["href"]))
        return text

    def _blocks(self, children: list) -> list[RenderableType]:
        """Merge runs of inline children into single Text blocks."""
        blocks: list[RenderableType] = []
        run: list[Inline] = []

        def flush() -> None:
            if run:
                text = self._text(run)
                # Whitespace between block elements is not content
                if text.plain.strip():
                    blocks.append(text)
                run.clear()

        for child in children:
            if is_inline(child):
                run.append(child)
            else:
                flush()
                blocks.append(child)
        flush()
        return blocks

    def _list(self, tag: str, properties: dict, children: list) -> RenderableType:
        grid = Table.grid(padding=(0, 1, 0, 0))
        grid.add_column(no_wrap=True)
        grid.add_column()

        items = [c for c in children if not (isinstance(c, str) and not c.strip())]
        number = int(properties.get("start", 1))
        for item in items:
            if tag == "ol":
                marker = Text(f"{number}.", style="markdown.item.number")
                number += 1
            else:
                marker = Text("•", style="markdown.item.bullet")
            grid.add_row(marker, item)
        return grid

    def _table(self, children: list) -> RenderableType:
        rows: list[TableRow] = []
        for child in children:
            if isinstance(child, TableSection):
                rows.extend(child.rows)
            elif isinstance(child, TableRow):
                rows.append(child)

        header = rows[0] if rows and rows[0].is_header else None
        body = rows[1:] if header else rows
        width = max((len(r.cells) for r in rows), default=0)

        table = Table(box=box.SIMPLE_HEAVY, show_header=header is not None)
        for i in range(width):
            if header and i < len(header.cells):
                cell = header.cells[i]
                table.add_column(cell.content, justify=cell.align)
            else:
                table.add_column("")
        for row in body:
            cells = [c.content for c in row.cells[:width]]
            cells.extend([""] * (width - len(cells)))
            table.add_row(*cells)
        return table
