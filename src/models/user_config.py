"""Per-call user configuration passed through to rule constructors."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserConfig(BaseModel):
    """User dictionary and rule tuning supplied by the caller.

    ``config_values`` maps a rule identifier to an integer option (for
    example the word limit of ``TOO_LONG_SENTENCE``). ``max_spelling_suggestions``
    of 0 means the speller returns all of its suggestions.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    user_dictionary: List[str] = Field(default_factory=list)
    config_values: Dict[str, int] = Field(default_factory=dict)
    max_spelling_suggestions: int = Field(default=0, ge=0)

    @field_validator("user_dictionary", mode="before")
    def _dedupe_words(cls, value: object) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        deduped: list[str] = []
        seen: set[str] = set()
        for word in value:  # type: ignore[union-attr]
            if word is None:
                continue
            cleaned = str(word).strip()
            if not cleaned or cleaned in seen:
                continue
            deduped.append(cleaned)
            seen.add(cleaned)
        return deduped

    def get_config_value(self, rule_id: str, default: int) -> int:
        return self.config_values.get(rule_id, default)
