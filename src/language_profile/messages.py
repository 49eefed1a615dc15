"""Localised rule messages keyed by locale."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from .errors import ConfigurationError


class MessageCatalog:
    """Read-only message lookup for one locale."""

    def __init__(self, locale: str, messages: Mapping[str, str] | None = None) -> None:
        self.locale = locale
        self._messages = dict(messages or {})

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def get(self, key: str, default: str = "") -> str:
        return self._messages.get(key, default)

    @classmethod
    def from_file(cls, path: str | Path, locale: str) -> "MessageCatalog":
        """Load a flat JSON object of string messages.

        Raises:
            ConfigurationError: the file cannot be read, is not valid JSON,
                or is not an object mapping strings to strings.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot load message catalog {path}") from exc

        if not isinstance(data, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in data.items()
        ):
            raise ConfigurationError(
                f"Message catalog {path} must be a JSON object of strings"
            )
        return cls(locale, data)
