"""Language check package exports.

This package exposes the key helpers used by other parts of the project
so callers can import from ``src.language_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .language_check import (
        DocumentReport,
        build_language_tool,
        check_document,
        check_text,
        resolve_overlaps,
        run_language_checks,
        write_reports,
    )
    from .language_check_config import DEFAULT_DISABLED_RULES, DEFAULT_IGNORED_WORDS
    from .language_tool_manager import LanguageToolManager
    from .report_utils import build_report_csv, build_report_markdown

__all__ = [
    "DocumentReport",
    "build_language_tool",
    "check_document",
    "check_text",
    "resolve_overlaps",
    "run_language_checks",
    "write_reports",
    "build_report_markdown",
    "build_report_csv",
    "LanguageToolManager",
    "DEFAULT_DISABLED_RULES",
    "DEFAULT_IGNORED_WORDS",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "DocumentReport": (".language_check", "DocumentReport"),
    "build_language_tool": (".language_check", "build_language_tool"),
    "check_document": (".language_check", "check_document"),
    "check_text": (".language_check", "check_text"),
    "resolve_overlaps": (".language_check", "resolve_overlaps"),
    "run_language_checks": (".language_check", "run_language_checks"),
    "write_reports": (".language_check", "write_reports"),
    "LanguageToolManager": (".language_tool_manager", "LanguageToolManager"),
    "build_report_csv": (".report_utils", "build_report_csv"),
    "build_report_markdown": (".report_utils", "build_report_markdown"),
    "DEFAULT_DISABLED_RULES": (".language_check_config", "DEFAULT_DISABLED_RULES"),
    "DEFAULT_IGNORED_WORDS": (".language_check_config", "DEFAULT_IGNORED_WORDS"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Importing the package does not start importing ``language_tool_python``
    until a helper that needs it is first used.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"src.language_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
