"""Exceptions raised by the language profile."""

from __future__ import annotations


class LanguageProfileError(Exception):
    """Base class for profile failures surfaced to callers."""


class ConfigurationError(LanguageProfileError):
    """A message catalog or user configuration could not be loaded."""


class LanguageModelError(LanguageProfileError):
    """The on-disk language model could not be opened or is unusable."""
