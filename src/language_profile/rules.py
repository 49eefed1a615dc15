"""Rule references for the Spanish profile.

The match logic of every rule lives in the LanguageTool engine. A rule here
is a configured reference to one engine rule: it knows its identifier and
category, carries the per-call configuration it was constructed with, and
picks its own matches out of an engine result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Sequence

from src.models import RuleMatch, UserConfig

from .errors import LanguageModelError
from .language_model import NgramLanguageModel
from .messages import MessageCatalog

_MARKER = re.compile(r"<marker>(.*?)</marker>", re.DOTALL)


@dataclass(frozen=True)
class Example:
    """An example sentence with the relevant span wrapped in ``<marker>``."""

    text: str
    correct: bool

    @classmethod
    def wrong(cls, text: str) -> "Example":
        return cls(text, False)

    @classmethod
    def fixed(cls, text: str) -> "Example":
        return cls(text, True)

    @property
    def marked_text(self) -> str:
        found = _MARKER.search(self.text)
        return found.group(1) if found else ""

    @property
    def plain_text(self) -> str:
        return _MARKER.sub(r"\1", self.text)


class Rule:
    """Base class for a configured reference to an engine rule."""

    rule_id: ClassVar[str] = ""
    category_id: ClassVar[str | None] = None
    default_description: ClassVar[str] = ""

    def __init__(
        self,
        messages: MessageCatalog,
        *,
        examples: Sequence[Example] = (),
        options: dict[str, Any] | None = None,
    ) -> None:
        self.messages = messages
        self.examples = tuple(examples)
        self.options = dict(options or {})

    @property
    def description(self) -> str:
        return self.messages.get(f"desc_{self.rule_id.lower()}", self.default_description)

    def accepts(self, match: RuleMatch) -> bool:
        return match.rule_id == self.rule_id

    def select_matches(self, matches: Iterable[RuleMatch]) -> list[RuleMatch]:
        """Return the matches in ``matches`` that belong to this rule."""
        return [match for match in matches if self.accepts(match)]

    def check(self, text: str, tool: Any) -> list[RuleMatch]:
        """Run ``tool`` over ``text`` and keep only this rule's matches."""
        return self.select_matches(RuleMatch.from_tool_match(m) for m in tool.check(text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id!r})"


class CommaWhitespaceRule(Rule):
    rule_id = "COMMA_PARENTHESIS_WHITESPACE"
    category_id = "TYPOGRAPHY"
    default_description = "Uso de espacios antes/después de comas y paréntesis"


class DoublePunctuationRule(Rule):
    rule_id = "DOUBLE_PUNCTUATION"
    category_id = "PUNCTUATION"
    default_description = "Uso de dos puntos o comas consecutivos"


class SpanishUnpairedBracketsRule(Rule):
    rule_id = "ES_UNPAIRED_BRACKETS"
    category_id = "PUNCTUATION"
    default_description = "Signos de apertura o cierre sin pareja"


class QuestionMarkRule(Rule):
    rule_id = "ES_QUESTION_MARK"
    category_id = "PUNCTUATION"
    default_description = "Falta el signo de interrogación o exclamación de apertura"


class MorfologikSpanishSpellerRule(Rule):
    """Spelling rule; words in the user dictionary are never reported."""

    rule_id = "MORFOLOGIK_RULE_ES"
    category_id = "TYPOS"
    default_description = "Posible error ortográfico"

    def __init__(
        self,
        messages: MessageCatalog,
        user_config: UserConfig | None = None,
        alt_languages: Sequence[str] = (),
    ) -> None:
        super().__init__(messages)
        self.user_config = user_config or UserConfig()
        self.alt_languages = tuple(alt_languages)
        self._accepted = frozenset(self.user_config.user_dictionary)

    def accepts(self, match: RuleMatch) -> bool:
        return super().accepts(match) and match.matched_text not in self._accepted

    def select_matches(self, matches: Iterable[RuleMatch]) -> list[RuleMatch]:
        selected = super().select_matches(matches)
        limit = self.user_config.max_spelling_suggestions
        if not limit:
            return selected
        return [
            match.model_copy(update={"replacements": match.replacements[:limit]})
            for match in selected
        ]


class UppercaseSentenceStartRule(Rule):
    rule_id = "UPPERCASE_SENTENCE_START"
    category_id = "CASING"
    default_description = "La oración no empieza con mayúscula"


class SpanishWordRepeatRule(Rule):
    rule_id = "SPANISH_WORD_REPEAT_RULE"
    category_id = "MISC"
    default_description = "Repetición de palabras"


class MultipleWhitespaceRule(Rule):
    rule_id = "WHITESPACE_RULE"
    category_id = "TYPOGRAPHY"
    default_description = "Espacios en blanco repetidos"


class SpanishWikipediaRule(Rule):
    rule_id = "SPANISH_WIKIPEDIA_COMMON_ERRORS"
    category_id = "WIKIPEDIA"
    default_description = "Errores frecuentes en la Wikipedia"


class SpanishWrongWordInContextRule(Rule):
    rule_id = "SPANISH_WRONG_WORD_IN_CONTEXT"
    category_id = "CONFUSED_WORDS"
    default_description = "Palabras confundidas en contexto"


class WordLimitRule(Rule):
    """Style rule that only reports spans longer than ``max_words`` words.

    The engine flags spans against its own default limit; the limit here may
    be raised or lowered per user through ``UserConfig.config_values``.
    """

    default_max_words: ClassVar[int] = 0

    def __init__(
        self,
        messages: MessageCatalog,
        user_config: UserConfig | None = None,
        default_max_words: int | None = None,
    ) -> None:
        user_config = user_config or UserConfig()
        max_words = user_config.get_config_value(
            self.rule_id, default_max_words or self.default_max_words
        )
        if max_words <= 0:
            raise ValueError(f"{self.rule_id} needs a positive word limit, got {max_words}")
        super().__init__(messages, options={"max_words": max_words})

    @property
    def max_words(self) -> int:
        return self.options["max_words"]

    def accepts(self, match: RuleMatch) -> bool:
        return super().accepts(match) and len(match.matched_text.split()) > self.max_words


class LongSentenceRule(WordLimitRule):
    rule_id = "TOO_LONG_SENTENCE"
    category_id = "STYLE"
    default_description = "Oración demasiado larga"
    default_max_words = 35


class LongParagraphRule(WordLimitRule):
    rule_id = "TOO_LONG_PARAGRAPH"
    category_id = "STYLE"
    default_description = "Párrafo demasiado largo"
    default_max_words = 220


class SimpleReplaceRule(Rule):
    rule_id = "ES_SIMPLE_REPLACE"
    category_id = "MISC"
    default_description = "Sustitución de palabras incorrectas"


class SimpleReplaceVerbsRule(Rule):
    rule_id = "ES_SIMPLE_REPLACE_VERBS"
    category_id = "MISC"
    default_description = "Formas verbales incorrectas"


class SpanishConfusionProbabilityRule(Rule):
    """Statistical confusion rule backed by the n-gram language model."""

    rule_id = "CONFUSION_RULE_ES"
    category_id = "CONFUSED_WORDS"
    default_description = "Posible confusión de palabras según estadística"

    def __init__(self, messages: MessageCatalog, language_model: NgramLanguageModel | None) -> None:
        if language_model is None or language_model.closed:
            raise LanguageModelError(f"{self.rule_id} requires an open language model")
        super().__init__(messages)
        self.language_model = language_model
