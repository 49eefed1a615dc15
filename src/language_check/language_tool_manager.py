"""Construction of LanguageTool checkers for a language profile."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import language_tool_python

from src.language_profile import SpanishProfile
from src.models import UserConfig

LOGGER = logging.getLogger(__name__)

# Long documents exceed the server's default check time; the server then
# aborts the check and resets the connection.
SERVER_CONFIG = {
    "requestLimitPeriodInSeconds": 60,
    "maxCheckTimeMillis": 120000,
}


class LanguageToolManager:
    """Builds ``language_tool_python.LanguageTool`` checkers for one profile.

    Accepted words are handed to the server as session-only spellings, so the
    speller stops flagging them without touching the on-disk dictionary.
    """

    def __init__(
        self,
        profile: SpanishProfile,
        *,
        accepted_words: Iterable[str] = (),
        disabled_rules: Iterable[str] = (),
    ) -> None:
        self.profile = profile
        # UserConfig already strips and dedupes dictionary entries.
        words = UserConfig(user_dictionary=list(accepted_words)).user_dictionary
        self.spellings = sorted(words)
        self.disabled_rules = frozenset(disabled_rules)

    def build_tool(
        self,
        language: str | None = None,
        *,
        enabled_rules: Iterable[str] = (),
    ) -> Any:
        """Build a checker for ``language`` (the profile's own code by default).

        Raises ``ValueError`` when ``language`` is not one of the profile's
        regional variants. ``enabled_rules`` switches on rules that are off by
        default in the engine; they are never also disabled.
        """

        language = language or self.profile.short_code
        if language not in self.profile.language_codes():
            raise ValueError(f"{language!r} is not a variant of {self.profile.name}")

        options: dict[str, Any] = {"config": dict(SERVER_CONFIG)}
        if self.spellings:
            options["newSpellings"] = list(self.spellings)
            options["new_spellings_persist"] = False
        tool = language_tool_python.LanguageTool(language, **options)

        enabled = set(enabled_rules)
        disabled = set(self.disabled_rules - enabled)
        tool.disabled_rules = disabled
        if enabled:
            tool.enabled_rules = enabled
        LOGGER.info(
            "Created LanguageTool for %s (%d spelling(s), %d rule(s) disabled, %d enabled)",
            language,
            len(self.spellings),
            len(disabled),
            len(enabled),
        )
        return tool
