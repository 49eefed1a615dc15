"""Utilities for generating language check reports.

This module centralises the Markdown and CSV report builders used by the
language check workflow. Keeping this logic separate makes it easier to
reuse and test independently from the checking routines.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .language_check import DocumentReport


def _format_suggestions(replacements: list[str] | None, max_suggestions: int = 3) -> str:
    """Return a human-friendly, truncated suggestions string.

    If there are no replacements returns "-". If there are more than
    ``max_suggestions`` replacements, the first ``max_suggestions`` are shown
    followed by "(+N more)".
    """
    if not replacements:
        return "-"
    if len(replacements) <= max_suggestions:
        return ", ".join(replacements)
    visible = ", ".join(replacements[:max_suggestions])
    remaining = len(replacements) - max_suggestions
    return f"{visible} (+{remaining} more)"


def _escape(value: str) -> str:
    return value.replace("|", "\\|")


def build_report_markdown(reports: Iterable["DocumentReport"]) -> str:
    """Convert the collected document reports into Markdown output."""

    report_list = list(reports)
    total_matches = sum(len(report.matches) for report in report_list)

    lines: list[str] = []
    lines.append("# Language Check Report")
    lines.append("")
    lines.append(f"- Checked {len(report_list)} document(s)")
    lines.append(f"- Total issues found: {total_matches}")

    if not report_list:
        lines.append("")
        lines.append("_No documents found for checking._")
        return "\n".join(lines)

    for report in sorted(report_list, key=lambda item: item.path.name.lower()):
        lines.append("")
        lines.append(f"## {report.path.name}")
        lines.append("")
        if not report.matches:
            lines.append("_No issues found._")
            continue

        lines.append(f"Found {len(report.matches)} issue(s).")
        lines.append("")
        lines.append("| Offset | Rule | Type | Issue | Message | Suggestions |")
        lines.append("| --- | --- | --- | --- | --- | --- |")
        for match in report.matches:
            issue_text = _escape(match.matched_text) if match.matched_text else "-"
            lines.append(
                f"| {match.offset} | `{match.rule_id}` | {match.issue_type} | {issue_text} "
                f"| {_escape(match.message)} | {_escape(_format_suggestions(match.replacements))} |"
            )

    return "\n".join(lines)


def build_report_csv(reports: Iterable["DocumentReport"]) -> list[list[str]]:
    """Convert the collected document reports into CSV data.

    Returns a list of rows, where each row is a list of string values.
    The first row contains the column headers.
    """

    rows: list[list[str]] = [
        [
            "Filename",
            "Offset",
            "Length",
            "Rule ID",
            "Category",
            "Type",
            "Issue",
            "Message",
            "Suggestions",
        ]
    ]

    for report in sorted(reports, key=lambda item: item.path.name.lower()):
        for match in report.matches:
            txt = _format_suggestions(match.replacements)
            rows.append([
                report.path.name,
                str(match.offset),
                str(match.length),
                match.rule_id,
                match.category_id or "",
                match.issue_type,
                match.matched_text,
                match.message,
                "" if txt == "-" else txt,
            ])

    return rows
