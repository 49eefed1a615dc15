from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.language_profile.typography import TYPOGRAPHY_STAGES, to_advanced_typography


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("'x'", "‘x’"),
        ('"x"', "«x»"),
        ("say 'hi' now", "say ‘hi’ now"),
        ("Hello, world.", "Hello, world."),
        ("", ""),
        ("l'home", "l’home"),
        ("Dijo: 'hola'.", "Dijo: ‘hola’."),
        ('Dijo "hola" y se fue', "Dijo «hola» y se fue"),
        ('Dijo "sí" y', "Dijo «sí» y"),
        ("d'ell a", "d’ell a"),
        ("''", "‘’"),
    ],
)
def test_to_advanced_typography(text: str, expected: str) -> None:
    assert to_advanced_typography(text) == expected


def test_quote_without_context_is_left_unchanged() -> None:
    assert to_advanced_typography("5' 3") == "5' 3"
    assert to_advanced_typography('a"b') == 'a"b'


@pytest.mark.parametrize("text", ["x²'s", "Ⅻ's", "3's", "x_'s"])
def test_apostrophe_after_non_letter_is_left_alone(text: str) -> None:
    assert to_advanced_typography(text) == text


def test_apostrophe_between_non_latin_letters() -> None:
    assert to_advanced_typography("Ωx'й") == "Ωx’й"
    assert to_advanced_typography("一'二") == "一’二"


def test_apostrophe_before_punctuation_closes() -> None:
    assert to_advanced_typography("los chicos' ¿no?") == "los chicos’ ¿no?"


def test_only_first_leading_quote_is_replaced() -> None:
    assert to_advanced_typography('"a" "b"') == "«a» «b»"


def test_stage_order_is_fixed() -> None:
    assert [stage.name for stage in TYPOGRAPHY_STAGES] == [
        "apostrophe",
        "leading_single_quote",
        "opening_single_quote",
        "trailing_single_quote",
        "leading_double_quote",
        "trailing_double_quote",
        "opening_guillemet",
        "closing_guillemet",
    ]


def test_trailing_quote_before_newline_is_not_treated_as_end() -> None:
    # Only the true end of the text counts as a boundary.
    assert to_advanced_typography('"x"\n') == '«x"\n'
