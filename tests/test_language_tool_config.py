from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import src.language_check as lc
import src.language_check.language_tool_manager as manager_mod
from src.language_check import LanguageToolManager
from src.language_profile import SpanishProfile
from src.models import UserConfig


@pytest.fixture
def captured(monkeypatch) -> dict:
    """Replace LanguageTool with a stub that records its constructor arguments."""
    captured: dict = {}

    class DummyLanguageTool:
        def __init__(self, language, *args, **kwargs):
            captured["language"] = language
            captured["kwargs"] = kwargs
            self.language = language
            self.disabled_rules: set[str] = set()
            self.enabled_rules: set[str] = set()

        def close(self) -> None:
            return None

    monkeypatch.setattr(manager_mod.language_tool_python, "LanguageTool", DummyLanguageTool)
    return captured


def test_build_language_tool_passes_config(captured: dict) -> None:
    tool = lc.build_language_tool(
        SpanishProfile(),
        user_config=UserConfig(user_dictionary=["Zaragozano"]),
        disabled_rules={"ES_SIMPLE_REPLACE"},
    )

    assert captured["language"] == "es"
    kwargs = captured["kwargs"]
    assert kwargs["config"]["maxCheckTimeMillis"] == 120000
    assert "Zaragozano" in kwargs["newSpellings"]
    assert "Ñuñoa" in kwargs["newSpellings"]
    assert {"ES_SIMPLE_REPLACE", "UPPERCASE_SENTENCE_START"} <= tool.disabled_rules


def test_build_language_tool_for_variant(captured: dict) -> None:
    lc.build_language_tool(SpanishProfile(), language="es-MX")
    assert captured["language"] == "es-MX"
    assert captured["kwargs"]["newSpellings"]


def test_build_language_tool_rejects_other_languages(captured: dict) -> None:
    with pytest.raises(ValueError, match="not a variant"):
        lc.build_language_tool(SpanishProfile(), language="pt-BR")
    assert captured == {}


def test_enabled_rules_are_not_disabled(captured: dict) -> None:
    tool = lc.build_language_tool(
        SpanishProfile(), enabled_rules={"UPPERCASE_SENTENCE_START"}
    )
    assert "UPPERCASE_SENTENCE_START" not in tool.disabled_rules
    assert tool.enabled_rules == {"UPPERCASE_SENTENCE_START"}


def test_manager_cleans_accepted_words(captured: dict) -> None:
    manager = LanguageToolManager(SpanishProfile(), accepted_words=[" b ", "a", "a", ""])
    assert manager.spellings == ["a", "b"]

    manager.build_tool("es-AR")
    assert captured["language"] == "es-AR"
    assert captured["kwargs"]["newSpellings"] == ["a", "b"]
    assert captured["kwargs"]["new_spellings_persist"] is False


def test_manager_without_words_registers_no_spellings(captured: dict) -> None:
    tool = LanguageToolManager(SpanishProfile()).build_tool()
    assert captured["language"] == "es"
    assert "newSpellings" not in captured["kwargs"]
    assert tool.disabled_rules == set()


def test_manager_rejects_other_languages(captured: dict) -> None:
    with pytest.raises(ValueError, match="not a variant of Spanish"):
        LanguageToolManager(SpanishProfile()).build_tool("ca")
    assert captured == {}
