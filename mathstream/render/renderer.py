from typing import Any, Optional

from mathstream.logging import get_logger
from mathstream.render.builder import ViewBuilder
from mathstream.render.scanner import Formula, scan
from mathstream.tree.nodes import (
    DocumentNode,
    ElementNode,
    RootNode,
    TextNode,
    class_list,
)

logger = get_logger(__name__)

MATH_CLASS = "language-math"
INLINE_MATH_CLASS = "math-inline"
DISPLAY_MATH_CLASS = "math-display"
LANGUAGE_PREFIX = "language-"


def extract_text(node: Optional[DocumentNode]) -> str:
    """Concatenate every text value under ``node``, depth first."""
    if isinstance(node, TextNode):
        return node.value
    children = getattr(node, "children", None)
    if children:
        return "".join(extract_text(child) for child in children)
    return ""


def code_language(code: ElementNode) -> str:
    """Language of a fenced code element, from its first class entry."""
    classes = class_list(code)
    if not classes:
        return ""
    first = classes[0]
    if not isinstance(first, str):
        return ""
    if first.startswith(LANGUAGE_PREFIX):
        return first[len(LANGUAGE_PREFIX):]
    return first


class TreeRenderer:
    """Converts a document tree into view nodes through a ViewBuilder."""

    def __init__(self, builder: ViewBuilder):
        self._builder = builder

    def render(self, node: Optional[DocumentNode]) -> Any:
        """Render ``node`` and its subtree.

        Returns a view node, a plain string, a list of strings and view
        nodes (text holding bracket math), or None for nodes that render
        as nothing.
        """
        if node is None:
            return None

        if isinstance(node, TextNode):
            return self._render_text(node)

        elif isinstance(node, ElementNode):
            return self._render_element(node)

        elif isinstance(node, RootNode):
            return self._builder.container(self._render_children(node.children))

        logger.warning("Unhandled document node type: %s %r", node.type, node)
        return None

    def _render_text(self, node: TextNode) -> Any:
        result = scan(node.value)
        if isinstance(result, str):
            return result

        parts = []
        for segment in result:
            if isinstance(segment, Formula):
                parts.append(self._builder.math_formula(segment.formula, inline=True))
            else:
                parts.append(segment.text)
        return parts

    def _render_element(self, node: ElementNode) -> Any:
        if node.tag_name == "code":
            classes = class_list(node)
            if MATH_CLASS in classes and INLINE_MATH_CLASS in classes:
                return self._builder.math_formula(extract_text(node), inline=True)

        if node.tag_name == "pre":
            code = self._find_code_child(node)
            if code is not None:
                text = extract_text(code)
                classes = class_list(code)
                if MATH_CLASS in classes and DISPLAY_MATH_CLASS in classes:
                    return self._builder.math_formula(text, inline=False)
                return self._builder.code_block(text, code_language(code))
            # A bare <pre> falls through to generic rendering.

        return self._builder.element(
            node.tag_name, node.properties, self._render_children(node.children)
        )

    def _render_children(self, children: list[DocumentNode]) -> list:
        rendered = []
        for child in children or []:
            result = self.render(child)
            # Empty text renders as nothing, like None
            if result is None or result == "":
                continue
            if isinstance(result, list):
                rendered.extend(result)
            else:
                rendered.append(result)
        return rendered

    @staticmethod
    def _find_code_child(node: ElementNode) -> Optional[ElementNode]:
        for child in node.children:
            if isinstance(child, ElementNode) and child.tag_name == "code":
                return child
        return None
