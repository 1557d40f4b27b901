from mathstream.render.scanner import (
    Formula,
    PlainText,
    iter_segments,
    normalize_formula,
    scan,
)


def test_no_brackets_returns_same_string():
    text = "Plain text without any formula."
    assert scan(text) is text


def test_empty_string():
    assert scan("") == ""


def test_unclosed_bracket_unchanged():
    assert scan("open [ x + y") == "open [ x + y"
    assert scan("close x + y ]") == "close x + y ]"


def test_empty_brackets_unchanged():
    assert scan("a [] b") == "a [] b"


def test_formula_between_text():
    assert scan("a [ x^2 ] b") == [
        PlainText("a "),
        Formula("x^2", inline=True),
        PlainText(" b"),
    ]


def test_multiline_formula_collapsed():
    assert scan("[ x\n + y ]") == [Formula("x + y")]


def test_adjacent_formulas_have_no_empty_text():
    assert scan("[a][b]") == [Formula("a"), Formula("b")]


def test_leading_and_trailing_formula():
    assert scan("[a] mid [b]") == [Formula("a"), PlainText(" mid "), Formula("b")]


def test_nested_brackets_match_innermost():
    assert scan("[a [b] c]") == [PlainText("[a "), Formula("b"), PlainText(" c]")]


def test_formula_is_inline():
    segments = scan("see [ \\frac{1}{2} ]")
    assert isinstance(segments[1], Formula)
    assert segments[1].inline is True
    assert segments[1].formula == "\\frac{1}{2}"


def test_normalize_formula():
    assert normalize_formula("  a \t+\n\n b  ") == "a + b"


def test_iter_segments_is_restartable():
    text = "x [y] z"
    assert list(iter_segments(text)) == list(iter_segments(text))


def test_iter_segments_plain_text_only():
    assert list(iter_segments("hello")) == [PlainText("hello")]
