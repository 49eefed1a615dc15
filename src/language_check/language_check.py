"""Spanish language checks for text and Markdown documents.

This module runs the LanguageTool engine over a document, routes each match
through the rule references of a :class:`SpanishProfile`, keeps only the
highest-priority match where matches overlap and renders suggestions with
Spanish typography. It also writes Markdown and CSV reports of the results.
"""

from __future__ import annotations

import csv
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

from language_tool_python.utils import LanguageToolError

from src.language_profile import MessageCatalog, SpanishProfile
from src.language_profile.language_model import NgramLanguageModel
from src.models import RuleMatch, UserConfig

from .language_check_config import DEFAULT_DISABLED_RULES, DEFAULT_IGNORED_WORDS
from .language_tool_manager import LanguageToolManager
from .report_utils import build_report_csv, build_report_markdown

LOGGER = logging.getLogger(__name__)

# Server failures worth retrying. OSError covers connection resets, refusals
# and timeouts; language_tool_python reports HTTP failures as LanguageToolError.
TRANSIENT_ERRORS = (OSError, LanguageToolError)


def _check_with_retry(
    tool: Any,
    text: str,
    *,
    max_retries: int = 3,
    base_delay: float = 3.0,
    max_delay: float = 60.0,
) -> list[Any]:
    """Return ``tool.check(text)``, retrying transient server failures.

    The wait doubles after each failed attempt, with some jitter, up to
    ``max_delay`` seconds. The last error is re-raised once ``max_retries``
    retries have failed.
    """

    attempt = 0
    while True:
        try:
            return tool.check(text)
        except TRANSIENT_ERRORS as exc:
            attempt += 1
            if attempt > max_retries:
                LOGGER.error("Language check failed after %d attempt(s): %s", attempt, exc)
                raise
            delay = min(base_delay * 2 ** (attempt - 1) * random.uniform(0.75, 1.25), max_delay)
            LOGGER.warning(
                "Language check attempt %d failed (%s); retrying in %.1f second(s)",
                attempt,
                type(exc).__name__,
                delay,
            )
            time.sleep(delay)


@dataclass
class DocumentReport:
    """Compilation of matches for a specific document."""

    path: Path
    matches: list[RuleMatch]


def resolve_overlaps(
    matches: Sequence[RuleMatch],
    priority: Callable[[RuleMatch], int],
) -> list[RuleMatch]:
    """Drop matches that overlap a match of higher priority.

    Matches are considered from highest to lowest priority; equal priorities
    keep their input order, so the earlier match wins a tie. The survivors are
    returned ordered by offset.
    """

    ranked = sorted(
        range(len(matches)),
        key=lambda index: (-priority(matches[index]), index),
    )
    kept: list[int] = []
    for index in ranked:
        candidate = matches[index]
        if any(candidate.overlaps(matches[other]) for other in kept):
            continue
        kept.append(index)
    kept.sort(key=lambda index: (matches[index].offset, index))
    return [matches[index] for index in kept]


def _filter_ignored(matches: Iterable[RuleMatch], words_to_ignore: set[str]) -> list[RuleMatch]:
    """Filter matches whose flagged text is configured to be ignored."""

    if not words_to_ignore:
        return list(matches)
    return [match for match in matches if match.matched_text not in words_to_ignore]


def check_text(
    text: str,
    profile: SpanishProfile,
    tool: Any,
    *,
    messages: MessageCatalog,
    user_config: UserConfig | None = None,
    alt_languages: Sequence[str] | None = None,
    language_model: NgramLanguageModel | None = None,
    ignored_words: set[str] | None = None,
    max_retries: int = 3,
    base_delay: float = 3.0,
) -> list[RuleMatch]:
    """Check ``text`` and return the surviving matches ordered by offset.

    Matches of rules the profile declares are routed through the rule
    reference; matches of the engine's own pattern rules are kept as they
    are. Matches of model rules are dropped when no ``language_model`` is
    given. Suggestions are rendered with the profile's typography.
    """

    rules = profile.active_rules(messages, user_config, None, alt_languages)
    if language_model is not None:
        rules.extend(profile.active_model_rules(language_model, messages, user_config))
    rules_by_id = {rule.rule_id: rule for rule in rules}

    raw_matches = _check_with_retry(
        tool, text, max_retries=max_retries, base_delay=base_delay
    )

    selected: list[RuleMatch] = []
    for raw in raw_matches or []:
        match = RuleMatch.from_tool_match(raw)
        rule = rules_by_id.get(match.rule_id)
        if rule is None:
            if match.rule_id in profile.model_rule_ids:
                LOGGER.debug("Dropping %s match: no language model", match.rule_id)
                continue
            selected.append(match)
            continue
        selected.extend(rule.select_matches([match]))

    selected = _filter_ignored(selected, set(ignored_words or ()))
    resolved = resolve_overlaps(
        selected, lambda match: profile.rule_priority(match.rule_id, match.category_id)
    )
    LOGGER.debug(
        "Kept %d of %d match(es) after resolving overlaps", len(resolved), len(selected)
    )
    return [
        match.model_copy(
            update={"replacements": [profile.normalize(r) for r in match.replacements]}
        )
        for match in resolved
    ]


def check_document(
    document_path: Path,
    profile: SpanishProfile,
    tool: Any,
    **options: Any,
) -> DocumentReport:
    """Run :func:`check_text` over a UTF-8 text or Markdown file."""

    text = document_path.read_text(encoding="utf-8")
    LOGGER.info("Checking %s", document_path.name)
    matches = check_text(text, profile, tool, **options)
    return DocumentReport(path=document_path, matches=matches)


def _collect_disabled_rules(additional_rules: set[str] | None) -> set[str]:
    """Merge default disabled rules with any additional entries."""
    rules = set(DEFAULT_DISABLED_RULES)
    if additional_rules:
        rules.update(additional_rules)
    return rules


def _collect_ignored_words(
    extra_words: set[str] | None, user_config: UserConfig | None = None
) -> set[str]:
    """Return the union of default ignored words, extras and the user dictionary."""
    words = set(DEFAULT_IGNORED_WORDS)
    if extra_words:
        words.update(extra_words)
    if user_config is not None:
        words.update(user_config.user_dictionary)
    return words


def build_language_tool(
    profile: SpanishProfile,
    *,
    language: str | None = None,
    user_config: UserConfig | None = None,
    disabled_rules: set[str] | None = None,
    enabled_rules: set[str] | None = None,
    ignored_words: set[str] | None = None,
) -> Any:
    """Instantiate a LanguageTool checker for ``profile`` or one of its variants.

    Raises ``ValueError`` for a language outside the profile's variants.
    """

    manager = LanguageToolManager(
        profile,
        accepted_words=_collect_ignored_words(ignored_words, user_config),
        disabled_rules=_collect_disabled_rules(disabled_rules),
    )
    return manager.build_tool(language, enabled_rules=enabled_rules or ())


def write_reports(reports: list[DocumentReport], report_path: Path) -> Path:
    """Write the Markdown report to ``report_path`` and a CSV beside it.

    Returns the path of the CSV file.
    """

    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report_markdown(reports), encoding="utf-8")

    csv_path = report_path.with_suffix(".csv")
    with csv_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerows(build_report_csv(reports))
    LOGGER.info("Wrote reports to %s and %s", report_path, csv_path)
    return csv_path


def run_language_checks(
    documents: Iterable[Path],
    *,
    profile: SpanishProfile,
    tool: Any,
    messages: MessageCatalog,
    report_path: Path | None = None,
    **options: Any,
) -> list[DocumentReport]:
    """Check every document, optionally writing Markdown and CSV reports.

    Engine failures propagate to the caller once retries are exhausted.
    """

    reports = [
        check_document(path, profile, tool, messages=messages, **options)
        for path in documents
    ]
    total = sum(len(report.matches) for report in reports)
    LOGGER.info("Checked %d document(s); %d match(es) found", len(reports), total)
    if report_path is not None:
        write_reports(reports, report_path)
    return reports
