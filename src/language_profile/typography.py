"""Spanish typographic quotes and apostrophes.

Straight ASCII quotes are rewritten into ‘ ’ « » by a fixed cascade of
context-sensitive substitutions. Each stage runs over the output of the
previous one, so the order of ``TYPOGRAPHY_STAGES`` is significant:
string-boundary stages run before the interior ones they would otherwise
be confused with.
"""

from __future__ import annotations

import re
import sys
import unicodedata
from typing import NamedTuple, Pattern


def _letter_class() -> str:
    r"""Return a character class matching exactly the Unicode letters (``\p{L}``).

    ``re`` has no category escapes, and ``[^\W\d_]`` also lets through
    numbers such as "²" or "Ⅻ", so the class is built from the
    ``unicodedata`` categories of every code point.
    """
    ranges: list[tuple[int, int]] = []
    start = None
    for code in range(sys.maxunicode + 1):
        if unicodedata.category(chr(code)).startswith("L"):
            if start is None:
                start = code
        elif start is not None:
            ranges.append((start, code - 1))
            start = None
    if start is not None:
        ranges.append((start, sys.maxunicode))
    body = "".join(
        f"\\U{low:08x}" if low == high else f"\\U{low:08x}-\\U{high:08x}"
        for low, high in ranges
    )
    return f"[{body}]"


_LETTER = _letter_class()
# Characters that may follow a closing quote: narrow no-break space,
# no-break space, space and sentence punctuation.
_BOUNDARY = "[\u202f\u00a0 !?,.;:]"


class TypographyStage(NamedTuple):
    name: str
    pattern: Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


TYPOGRAPHY_STAGES: tuple[TypographyStage, ...] = (
    TypographyStage(
        "apostrophe",
        re.compile(rf"({_LETTER})'({_LETTER}|{_BOUNDARY})"),
        "\\1\u2019\\2",
    ),
    TypographyStage("leading_single_quote", re.compile(r"\A'"), "\u2018"),
    TypographyStage(
        "opening_single_quote",
        re.compile("(['\u2019 \u00ab\"])'"),
        "\\1\u2018",
    ),
    TypographyStage("trailing_single_quote", re.compile(r"'\Z"), "\u2019"),
    TypographyStage("leading_double_quote", re.compile(r'\A"'), "\u00ab"),
    TypographyStage("trailing_double_quote", re.compile(r'"\Z'), "\u00bb"),
    TypographyStage("opening_guillemet", re.compile(' "'), " \u00ab"),
    TypographyStage(
        "closing_guillemet",
        re.compile(f'"({_BOUNDARY})'),
        "\u00bb\\1",
    ),
)


def to_advanced_typography(text: str) -> str:
    """Return ``text`` with straight quotes replaced by Spanish typography.

    >>> to_advanced_typography('"x"')
    '«x»'
    >>> to_advanced_typography("say 'hi' now")
    'say ‘hi’ now'
    """
    output = text
    for stage in TYPOGRAPHY_STAGES:
        output = stage.apply(output)
    return output
