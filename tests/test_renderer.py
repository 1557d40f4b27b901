import logging

from mathstream.render.builder import ElementBuilder, ViewElement
from mathstream.render.renderer import TreeRenderer, code_language, extract_text
from mathstream.tree.nodes import ElementNode, OtherNode, RootNode, TextNode


def make_renderer() -> TreeRenderer:
    return TreeRenderer(ElementBuilder())


def math_code(kind: str, text: str) -> ElementNode:
    return ElementNode(
        "code",
        {"className": ["language-math", kind]},
        [TextNode(text)],
    )


def test_none_renders_none():
    assert make_renderer().render(None) is None


def test_plain_text_is_returned_as_is():
    assert make_renderer().render(TextNode("hello")) == "hello"


def test_text_with_bracket_math():
    result = make_renderer().render(TextNode("a [ x^2 ] b"))
    assert result == [
        "a ",
        ViewElement("math-formula", {"value": "x^2", "inline": True}),
        " b",
    ]


def test_inline_math_code():
    node = math_code("math-inline", "E = mc^2")
    assert make_renderer().render(node) == ViewElement(
        "math-formula", {"value": "E = mc^2", "inline": True}
    )


def test_inline_math_needs_both_classes():
    node = ElementNode("code", {"className": ["math-inline"]}, [TextNode("x")])
    assert make_renderer().render(node) == ViewElement(
        "code", {"className": ["math-inline"]}, ["x"]
    )


def test_display_math():
    node = ElementNode("pre", {}, [math_code("math-display", "a=b")])
    assert make_renderer().render(node) == ViewElement(
        "math-formula", {"value": "a=b", "inline": False}
    )


def test_code_block_language():
    code = ElementNode(
        "code", {"className": ["language-python"]}, [TextNode("print(1)\n")]
    )
    result = make_renderer().render(ElementNode("pre", {}, [code]))
    assert result == ViewElement(
        "code-block", {"code": "print(1)\n", "language": "python"}
    )


def test_code_block_without_class_has_empty_language():
    code = ElementNode("code", {}, [TextNode("plain")])
    result = make_renderer().render(ElementNode("pre", {}, [code]))
    assert result.props == {"code": "plain", "language": ""}


def test_code_block_with_string_class_is_treated_as_unclassed():
    code = ElementNode("code", {"className": "language-python"}, [TextNode("x")])
    result = make_renderer().render(ElementNode("pre", {}, [code]))
    assert result.props["language"] == ""


def test_code_block_with_non_string_first_class_has_empty_language():
    code = ElementNode("code", {"className": [None, "x"]}, [TextNode("a")])
    result = make_renderer().render(ElementNode("pre", {}, [code]))
    assert result == ViewElement("code-block", {"code": "a", "language": ""})


def test_non_string_class_entries_do_not_break_math_detection():
    node = ElementNode("code", {"className": [3, {"k": 1}]}, [TextNode("x")])
    assert make_renderer().render(node) == ViewElement(
        "code", {"className": [3, {"k": 1}]}, ["x"]
    )


def test_pre_uses_first_code_child():
    first = ElementNode("code", {"className": ["language-js"]}, [TextNode("one")])
    second = ElementNode("code", {"className": ["language-go"]}, [TextNode("two")])
    pre = ElementNode("pre", {}, [TextNode("\n"), first, second])
    assert make_renderer().render(pre).props == {"code": "one", "language": "js"}


def test_bare_pre_renders_generically():
    pre = ElementNode("pre", {"id": "raw"}, [TextNode("text")])
    assert make_renderer().render(pre) == ViewElement("pre", {"id": "raw"}, ["text"])


def test_generic_element_keeps_order_and_attributes():
    node = ElementNode(
        "p",
        {"className": ["lead"]},
        [
            TextNode("one "),
            ElementNode("strong", {}, [TextNode("two")]),
            TextNode(" three"),
        ],
    )
    assert make_renderer().render(node) == ViewElement(
        "p",
        {"className": ["lead"]},
        ["one ", ViewElement("strong", {}, ["two"]), " three"],
    )


def test_bracket_math_is_spliced_into_parent():
    node = ElementNode("p", {}, [TextNode("x [a] y")])
    result = make_renderer().render(node)
    assert result.children == [
        "x ",
        ViewElement("math-formula", {"value": "a", "inline": True}),
        " y",
    ]


def test_unknown_child_is_dropped(caplog):
    node = ElementNode("p", {}, [TextNode("a"), OtherNode("comment", {"value": "hidden"}), TextNode("b")])
    with caplog.at_level(logging.WARNING):
        result = make_renderer().render(node)
    assert result.children == ["a", "b"]


def test_unknown_node_logs_and_returns_none(caplog):
    with caplog.at_level(logging.WARNING, logger="mathstream.render.renderer"):
        result = make_renderer().render(OtherNode("comment", {"value": "note"}))
    assert result is None
    assert "comment" in caplog.text


def test_empty_root_renders_empty_container():
    assert make_renderer().render(RootNode()) == ViewElement("div", {}, [])


def test_root_children():
    root = RootNode([ElementNode("hr"), TextNode("end")])
    assert make_renderer().render(root) == ViewElement(
        "div", {}, [ViewElement("hr", {}, []), "end"]
    )


def test_math_code_ignores_nested_markup():
    node = ElementNode(
        "code",
        {"className": ["language-math", "math-inline"], "data-x": "1"},
        [TextNode("a"), ElementNode("span", {}, [TextNode("+b")])],
    )
    assert make_renderer().render(node).props == {"value": "a+b", "inline": True}


def test_extract_text_is_consistent_across_levels():
    code = ElementNode(
        "code",
        {},
        [TextNode("x = "), ElementNode("span", {}, [TextNode("1")]), TextNode("\n")],
    )
    pre = ElementNode("pre", {}, [code])
    assert extract_text(pre) == extract_text(code)
    assert extract_text(code) == "".join(extract_text(c) for c in code.children)
    assert extract_text(code) == "x = 1\n"


def test_extract_text_of_childless_nodes():
    assert extract_text(ElementNode("br")) == ""
    assert extract_text(OtherNode("comment")) == ""
    assert extract_text(None) == ""


def test_code_language_without_prefix():
    assert code_language(ElementNode("code", {"className": ["shell"]})) == "shell"
