import re
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass
class PlainText:
    text: str


@dataclass
class Formula:
    formula: str
    inline: bool = True


Segment = Union[PlainText, Formula]

# No nesting: the first "]" after "[" always closes the span.
BRACKET_MATH = re.compile(r"\[([^\[\]]+)\]")
WHITESPACE_RUN = re.compile(r"\s+")


def normalize_formula(body: str) -> str:
    """Trim a formula body and collapse every whitespace run to one space."""
    return WHITESPACE_RUN.sub(" ", body.strip())


def iter_segments(text: str) -> Iterator[Segment]:
    """Yield the text and bracket-math segments of ``text`` in order.

    Empty plain-text segments are never produced, so two adjacent formulas
    come out back to back.
    """
    last_end = 0
    for match in BRACKET_MATH.finditer(text):
        if match.start() > last_end:
            yield PlainText(text[last_end:match.start()])
        yield Formula(normalize_formula(match.group(1)), inline=True)
        last_end = match.end()

    if last_end < len(text):
        yield PlainText(text[last_end:])


def scan(text: str) -> Union[str, list[Segment]]:
    """Split ``text`` into plain text and ``[ formula ]`` segments.

    Returns ``text`` itself, not a list, when it holds no bracket formula.
    """
    segments = list(iter_segments(text))
    if any(isinstance(s, Formula) for s in segments):
        return segments
    return text
