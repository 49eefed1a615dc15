"""Model for a single match reported by a checking rule.

Matches are produced by the external engine; this model keeps only the fields
needed to rank overlapping matches and render suggestions.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleMatch(BaseModel):
    """A span of text flagged by one rule.

    - rule_id: identifier of the rule that fired
    - offset/length: character span in the checked text
    - message: rule message shown to the user
    - replacements: suggested replacements, best first
    - category_id: rule category (e.g. "TYPOGRAPHY", "STYLE"), if known
    - issue_type: engine issue type (e.g. "misspelling", "grammar")
    - matched_text: the flagged text itself
    """

    model_config = ConfigDict(extra="forbid")

    rule_id: str
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    message: str = ""
    replacements: List[str] = Field(default_factory=list)
    category_id: str | None = None
    issue_type: str = "unknown"
    matched_text: str = ""

    @field_validator("rule_id", mode="before")
    def _strip_rule(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("rule_id must not be empty")
        return result

    @field_validator("message", mode="before")
    def _strip_message(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("matched_text", mode="before")
    def _text_or_empty(cls, value: object) -> str:
        # Kept verbatim: whitespace rules flag spans made only of spaces.
        return str(value or "")

    @field_validator("issue_type", mode="before")
    def _default_issue_type(cls, value: object) -> str:
        return str(value or "").strip() or "unknown"

    @field_validator("replacements", mode="before")
    def _normalise_replacements(cls, value: object) -> List[str]:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(x) for x in value if str(x).strip()]
        # allow a single suggestion as a bare string
        return [str(value)]

    @property
    def end(self) -> int:
        return self.offset + self.length

    def overlaps(self, other: "RuleMatch") -> bool:
        """Return True when the two spans share at least one character.

        Zero-length matches overlap a span that strictly contains their offset.
        """
        if self.length == 0 and other.length == 0:
            return self.offset == other.offset
        if self.length == 0:
            return other.offset <= self.offset < other.end
        if other.length == 0:
            return self.offset <= other.offset < self.end
        return self.offset < other.end and other.offset < self.end

    @classmethod
    def from_tool_match(cls, match: object) -> "RuleMatch":
        """Build a RuleMatch from a ``language_tool_python`` match object."""

        return cls(
            rule_id=getattr(match, "ruleId", "") or "UNKNOWN",
            offset=int(getattr(match, "offset", 0) or 0),
            length=int(getattr(match, "errorLength", 0) or 0),
            message=getattr(match, "message", ""),
            replacements=list(getattr(match, "replacements", []) or []),
            category_id=getattr(match, "category", None) or None,
            issue_type=getattr(match, "ruleIssueType", ""),
            matched_text=getattr(match, "matchedText", ""),
        )
