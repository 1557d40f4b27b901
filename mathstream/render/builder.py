from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Union


class ViewBuilder(ABC):
    """Construction primitives a rendering backend provides to TreeRenderer.

    Children passed in are plain strings or values this builder returned
    earlier; the renderer never looks inside them.
    """

    @abstractmethod
    def element(self, tag: str, properties: dict, children: list) -> Any:
        ...

    @abstractmethod
    def code_block(self, code: str, language: str) -> Any:
        ...

    @abstractmethod
    def math_formula(self, value: str, inline: bool) -> Any:
        ...

    @abstractmethod
    def container(self, children: list) -> Any:
        ...


@dataclass
class ViewElement:
    tag: str
    props: dict = field(default_factory=dict)
    children: list[Union["ViewElement", str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "props": dict(self.props),
            "children": [
                c.to_dict() if isinstance(c, ViewElement) else c
                for c in self.children
            ],
        }


class ElementBuilder(ViewBuilder):
    """Builds framework-neutral ViewElement trees."""

    CONTAINER_TAG = "div"

    def element(self, tag: str, properties: dict, children: list) -> ViewElement:
        return ViewElement(tag, dict(properties), list(children))

    def code_block(self, code: str, language: str) -> ViewElement:
        return ViewElement("code-block", {"code": code, "language": language})

    def math_formula(self, value: str, inline: bool) -> ViewElement:
        return ViewElement("math-formula", {"value": value, "inline": inline})

    def container(self, children: list) -> ViewElement:
        return ViewElement(self.CONTAINER_TAG, {}, list(children))
