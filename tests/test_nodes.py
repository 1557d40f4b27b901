from mathstream.tree.nodes import (
    ElementNode,
    OtherNode,
    RootNode,
    TextNode,
    class_list,
    node_from_dict,
    node_to_dict,
)


HAST = {
    "type": "root",
    "children": [
        {
            "type": "element",
            "tagName": "p",
            "properties": {},
            "children": [
                {"type": "text", "value": "Energy: "},
                {
                    "type": "element",
                    "tagName": "code",
                    "properties": {"className": ["language-math", "math-inline"]},
                    "children": [{"type": "text", "value": "E=mc^2"}],
                },
            ],
        },
        {"type": "comment", "value": "draft"},
    ],
}


def test_node_from_dict_builds_variants():
    root = node_from_dict(HAST)
    assert isinstance(root, RootNode)
    paragraph, comment = root.children
    assert isinstance(paragraph, ElementNode)
    assert paragraph.tag_name == "p"
    assert paragraph.children[0] == TextNode("Energy: ")
    assert class_list(paragraph.children[1]) == ["language-math", "math-inline"]
    assert comment == OtherNode("comment", {"value": "draft"})


def test_node_from_dict_none():
    assert node_from_dict(None) is None


def test_node_from_dict_missing_children():
    assert node_from_dict({"type": "root"}) == RootNode()
    element = node_from_dict({"type": "element", "tagName": "hr"})
    assert element == ElementNode("hr")


def test_node_to_dict_restores_hast():
    assert node_to_dict(node_from_dict(HAST)) == HAST


def test_type_tags():
    assert TextNode("x").type == "text"
    assert ElementNode("p").type == "element"
    assert RootNode().type == "root"


def test_class_list_requires_a_list():
    assert class_list(ElementNode("code", {"className": ["a", "b"]})) == ["a", "b"]
    assert class_list(ElementNode("code", {"className": "a b"})) == []
    assert class_list(ElementNode("code")) == []
