"""Maintainer record attached to a language profile."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Contributor(BaseModel):
    """A person maintaining a language module, with an optional homepage."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    url: str | None = None

    @field_validator("name", mode="before")
    def _strip_name(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("name must not be empty")
        return result

    @field_validator("url", mode="before")
    def _strip_url(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value).strip() or None

    def __str__(self) -> str:
        if self.url:
            return f"{self.name} ({self.url})"
        return self.name
