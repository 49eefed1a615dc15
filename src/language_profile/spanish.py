"""The Spanish language profile.

Ties together identity metadata, the rules Spanish supports, their priorities,
typographic normalisation and the lifecycle of the shared language model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from src.models import Contributor, MaintainedState, UserConfig

from .language_model import LanguageModelHandle, ModelLoader, NgramLanguageModel
from .messages import MessageCatalog
from .priorities import (
    SPANISH_RULE_PRIORITIES,
    PriorityFallback,
    PriorityResolver,
    base_priority_for_id,
)
from .rules import (
    CommaWhitespaceRule,
    DoublePunctuationRule,
    Example,
    LongParagraphRule,
    LongSentenceRule,
    MorfologikSpanishSpellerRule,
    MultipleWhitespaceRule,
    QuestionMarkRule,
    Rule,
    SimpleReplaceRule,
    SimpleReplaceVerbsRule,
    SpanishConfusionProbabilityRule,
    SpanishUnpairedBracketsRule,
    SpanishWikipediaRule,
    SpanishWordRepeatRule,
    SpanishWrongWordInContextRule,
    UppercaseSentenceStartRule,
)
from .typography import to_advanced_typography

LOGGER = logging.getLogger(__name__)

# Engine components selected for Spanish. They are implemented by LanguageTool
# and only referenced by name here.
SPANISH_COMPONENTS: Mapping[str, str] = MappingProxyType(
    {
        "word_tokenizer": "SpanishWordTokenizer",
        "sentence_tokenizer": "SRXSentenceTokenizer",
        "tagger": "SpanishTagger",
        "disambiguator": "SpanishHybridDisambiguator",
        "synthesizer": "SpanishSynthesizer",
    }
)


class SpanishProfile:
    """Language profile for Spanish and its regional variants."""

    name = "Spanish"
    short_code = "es"
    countries: tuple[str, ...] = (
        "ES", "", "MX", "GT", "CR", "PA", "DO",
        "VE", "PE", "AR", "EC", "CL", "UY", "PY",
        "BO", "SV", "HN", "NI", "PR", "US", "CU",
    )
    maintainers: tuple[Contributor, ...] = (
        Contributor(name="Juan Martorell", url="http://languagetool-es.blogspot.com/"),
        Contributor(name="Jaume Ortolà"),
    )
    maintained_state = MaintainedState.ACTIVELY_MAINTAINED
    opening_quote = "«"
    closing_quote = "»"
    components = SPANISH_COMPONENTS
    # Rules that only run when a language model is passed to active_model_rules.
    model_rule_ids: frozenset[str] = frozenset({SpanishConfusionProbabilityRule.rule_id})

    def __init__(
        self,
        *,
        priority_fallback: PriorityFallback = base_priority_for_id,
        model_loader: ModelLoader = NgramLanguageModel,
    ) -> None:
        self._priorities = PriorityResolver(SPANISH_RULE_PRIORITIES, priority_fallback)
        self._language_model = LanguageModelHandle(self.short_code, model_loader)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.short_code!r})"

    def __enter__(self) -> "SpanishProfile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def language_codes(self) -> list[str]:
        """Return ``es`` followed by one ``es-XX`` code per region."""
        return [
            f"{self.short_code}-{country}" if country else self.short_code
            for country in self.countries
        ]

    # Rules

    def active_rules(
        self,
        messages: MessageCatalog,
        user_config: UserConfig | None = None,
        mother_tongue: str | None = None,
        alt_languages: Sequence[str] | None = None,
    ) -> list[Rule]:
        """Construct one fresh instance of every Spanish rule, in declaration order.

        ``mother_tongue`` is accepted for parity with other profiles; no
        Spanish rule depends on it. Constructor errors propagate.
        """
        return [
            CommaWhitespaceRule(
                messages,
                examples=(
                    Example.wrong("En su opinión<marker> ,</marker> no era verdad."),
                    Example.fixed("En su opinión<marker>,</marker> no era verdad."),
                ),
            ),
            DoublePunctuationRule(messages),
            SpanishUnpairedBracketsRule(messages),
            QuestionMarkRule(messages),
            MorfologikSpanishSpellerRule(messages, user_config, alt_languages or ()),
            UppercaseSentenceStartRule(
                messages,
                examples=(
                    Example.wrong("Venta al público. <marker>ha</marker> subido mucho."),
                    Example.fixed("Venta al público. <marker>Ha</marker> subido mucho."),
                ),
            ),
            SpanishWordRepeatRule(messages),
            MultipleWhitespaceRule(messages),
            SpanishWikipediaRule(messages),
            SpanishWrongWordInContextRule(messages),
            LongSentenceRule(messages, user_config, 35),
            LongParagraphRule(messages, user_config),
            SimpleReplaceRule(messages),
            SimpleReplaceVerbsRule(messages),
        ]

    def active_model_rules(
        self,
        language_model: NgramLanguageModel,
        messages: MessageCatalog,
        user_config: UserConfig | None = None,
    ) -> list[Rule]:
        """Rules that additionally need the shared language model."""
        return [SpanishConfusionProbabilityRule(messages, language_model)]

    # Priorities

    def priority_of(self, rule_id: str) -> int:
        return self._priorities.priority_of(rule_id)

    def rule_priority(self, rule_id: str, category_id: str | None = None) -> int:
        return self._priorities.rule_priority(rule_id, category_id)

    # Typography

    def normalize(self, text: str) -> str:
        return to_advanced_typography(text)

    # Language model lifecycle

    def acquire_language_model(self, location: str | Path) -> NgramLanguageModel:
        return self._language_model.acquire(location)

    def release_language_model(self) -> None:
        self._language_model.release()

    @property
    def language_model(self) -> Optional[NgramLanguageModel]:
        return self._language_model.current

    def close(self) -> None:
        """Release the language model, if any."""
        LOGGER.debug("Closing %r", self)
        self.release_language_model()
