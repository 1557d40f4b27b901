"""Markdown to document-tree conversion.

Parses Markdown with markdown-it-py and reshapes its syntax tree into the
hast-style nodes the renderer consumes, using the same conventions as the
remark-math / rehype pipeline:

- ``$x$``   -> ``code.language-math.math-inline``
- ``$$x$$`` -> ``pre > code.language-math.math-display``
- fences    -> ``pre > code.language-<info>``
- raw HTML  -> ``raw`` nodes
"""

from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.dollarmath import dollarmath_plugin

from mathstream.tree.nodes import (
    DocumentNode,
    ElementNode,
    OtherNode,
    RootNode,
    TextNode,
)

INLINE_MATH_CLASSES = ["language-math", "math-inline"]
DISPLAY_MATH_CLASSES = ["language-math", "math-display"]

# markdown-it node types whose tag maps straight onto a hast element
CONTAINER_TYPES = {
    "paragraph",
    "heading",
    "bullet_list",
    "ordered_list",
    "list_item",
    "blockquote",
    "strong",
    "em",
    "s",
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
}


def create_parser() -> MarkdownIt:
    """Create a configured markdown-it parser."""
    md = MarkdownIt("commonmark")
    md.enable("table")
    md.enable("strikethrough")
    dollarmath_plugin(md)
    return md


_parser: Optional[MarkdownIt] = None


def get_parser() -> MarkdownIt:
    """Get or create the shared parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> RootNode:
    """Parse Markdown into a RootNode tree.

    Incomplete input, such as a fence whose closing marker has not arrived
    yet, parses the same way a finished document would.
    """
    tokens = get_parser().parse(text)
    return RootNode(children=convert_children(SyntaxTreeNode(tokens)))


def convert_children(node: SyntaxTreeNode) -> list[DocumentNode]:
    converted: list[DocumentNode] = []
    for child in node.children:
        # Tight list items hide their paragraphs; keep only the content.
        if child.type == "paragraph" and child.hidden:
            converted.extend(convert_children(child))
        elif child.type == "inline":
            converted.extend(convert_children(child))
        else:
            result = convert_node(child)
            if result is not None:
                converted.append(result)
    return merge_text(converted)


def merge_text(nodes: list[DocumentNode]) -> list[DocumentNode]:
    """Join neighbouring text nodes the way hast keeps one run per text."""
    merged: list[DocumentNode] = []
    for node in nodes:
        if isinstance(node, TextNode) and merged and isinstance(merged[-1], TextNode):
            merged[-1] = TextNode(value=merged[-1].value + node.value)
        else:
            merged.append(node)
    return merged


def convert_node(node: SyntaxTreeNode) -> Optional[DocumentNode]:
    node_type = node.type

    if node_type in ("text", "text_special"):
        return TextNode(value=node.content)

    elif node_type == "softbreak":
        return TextNode(value="\n")

    elif node_type == "hardbreak":
        return ElementNode("br")

    elif node_type == "hr":
        return ElementNode("hr")

    elif node_type == "code_inline":
        return ElementNode("code", {}, [TextNode(value=node.content)])

    elif node_type.startswith("math_inline"):
        return ElementNode(
            "code",
            {"className": list(INLINE_MATH_CLASSES)},
            [TextNode(value=node.content)],
        )

    elif node_type.startswith("math_block"):
        code = ElementNode(
            "code",
            {"className": list(DISPLAY_MATH_CLASSES)},
            [TextNode(value=node.content.strip())],
        )
        return ElementNode("pre", {}, [code])

    elif node_type in ("fence", "code_block"):
        info = node.info.strip().split()[0] if node.info.strip() else ""
        properties = {"className": [f"language-{info}"]} if info else {}
        code = ElementNode("code", properties, [TextNode(value=node.content)])
        return ElementNode("pre", {}, [code])

    elif node_type == "link":
        properties = {"href": node.attrs.get("href", "")}
        if node.attrs.get("title"):
            properties["title"] = node.attrs["title"]
        return ElementNode("a", properties, convert_children(node))

    elif node_type == "image":
        properties = {"src": node.attrs.get("src", ""), "alt": node.content}
        if node.attrs.get("title"):
            properties["title"] = node.attrs["title"]
        return ElementNode("img", properties)

    elif node_type in ("html_block", "html_inline"):
        return OtherNode(type="raw", data={"value": node.content})

    elif node_type in CONTAINER_TYPES:
        return ElementNode(node.tag, element_properties(node), convert_children(node))

    return OtherNode(type=node_type, data={"content": node.content})


def element_properties(node: SyntaxTreeNode) -> dict:
    properties: dict = {}
    if node.type == "ordered_list":
        start = node.attrs.get("start")
        if start is not None:
            properties["start"] = int(start)
    elif node.type in ("th", "td"):
        style = str(node.attrs.get("style", ""))
        if style.startswith("text-align:"):
            properties["align"] = style[len("text-align:"):]
    return properties
