"""Spanish language profile for LanguageTool-backed checking."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "language_check",
    "language_profile",
    "models",
]
