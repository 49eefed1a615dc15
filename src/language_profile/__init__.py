"""Spanish language profile.

Callers normally only need :class:`SpanishProfile`; the submodules are
exported for tests and for code that ranks matches or normalises text
without a profile instance.
"""

from __future__ import annotations

from .errors import ConfigurationError, LanguageModelError, LanguageProfileError
from .language_model import LanguageModelHandle, NgramLanguageModel
from .messages import MessageCatalog
from .priorities import (
    SPANISH_RULE_PRIORITIES,
    PriorityResolver,
    base_priority_for_id,
)
from .rules import Example, Rule
from .spanish import SpanishProfile
from .typography import to_advanced_typography

__all__ = [
    "ConfigurationError",
    "Example",
    "LanguageModelError",
    "LanguageModelHandle",
    "LanguageProfileError",
    "MessageCatalog",
    "NgramLanguageModel",
    "PriorityResolver",
    "Rule",
    "SPANISH_RULE_PRIORITIES",
    "SpanishProfile",
    "base_priority_for_id",
    "to_advanced_typography",
]
