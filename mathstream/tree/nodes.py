from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


@dataclass
class TextNode:
    value: str
    type: str = field(default="text", init=False)


@dataclass
class ElementNode:
    tag_name: str
    properties: dict = field(default_factory=dict)
    children: list["DocumentNode"] = field(default_factory=list)
    type: str = field(default="element", init=False)


@dataclass
class RootNode:
    children: list["DocumentNode"] = field(default_factory=list)
    type: str = field(default="root", init=False)


@dataclass
class OtherNode:
    """Any hast node kind the renderer has no rule for (comment, doctype, raw...)."""

    type: str
    data: dict = field(default_factory=dict)


DocumentNode = Union[TextNode, ElementNode, RootNode, OtherNode]


def class_list(node: ElementNode) -> list[str]:
    """Return the element's className list, or [] when absent or not a list."""
    classes = node.properties.get("className")
    if isinstance(classes, list):
        return classes
    return []


def node_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[DocumentNode]:
    """Build a DocumentNode from a hast-shaped mapping."""
    if data is None:
        return None

    node_type = data.get("type", "")

    if node_type == "text":
        return TextNode(value=data.get("value", ""))

    elif node_type == "element":
        children = [node_from_dict(c) for c in data.get("children") or []]
        return ElementNode(
            tag_name=data.get("tagName", ""),
            properties=dict(data.get("properties") or {}),
            children=[c for c in children if c is not None],
        )

    elif node_type == "root":
        children = [node_from_dict(c) for c in data.get("children") or []]
        return RootNode(children=[c for c in children if c is not None])

    return OtherNode(
        type=node_type,
        data={k: v for k, v in data.items() if k != "type"},
    )


def node_to_dict(node: DocumentNode) -> dict:
    """Serialize a DocumentNode back to its hast-shaped mapping."""
    if isinstance(node, TextNode):
        return {"type": "text", "value": node.value}

    elif isinstance(node, ElementNode):
        return {
            "type": "element",
            "tagName": node.tag_name,
            "properties": dict(node.properties),
            "children": [node_to_dict(c) for c in node.children],
        }

    elif isinstance(node, RootNode):
        return {"type": "root", "children": [node_to_dict(c) for c in node.children]}

    return {"type": node.type, **node.data}
