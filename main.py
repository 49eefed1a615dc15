"""Command-line entrypoint for checking Spanish documents."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from src.language_check import build_language_tool, run_language_checks
from src.language_profile import (
    LanguageProfileError,
    MessageCatalog,
    SpanishProfile,
)
from src.models import UserConfig

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check Spanish text or Markdown documents with LanguageTool.",
    )
    parser.add_argument(
        "documents",
        nargs="*",
        type=Path,
        metavar="DOCUMENT",
        help="Text or Markdown files to check.",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Regional variant to check with, e.g. es-MX (defaults to es).",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=Path("Documents/language-check-report.md"),
        help="Markdown report path; a CSV is written beside it.",
    )
    parser.add_argument(
        "--messages",
        type=Path,
        default=None,
        help="Optional JSON message catalog for rule descriptions.",
    )
    parser.add_argument(
        "--user-dictionary",
        type=Path,
        default=None,
        help="File with one accepted word per line.",
    )
    parser.add_argument(
        "--disable-rule",
        action="append",
        default=[],
        metavar="RULE_ID",
        help="Additional LanguageTool rule to disable (repeatable).",
    )
    parser.add_argument(
        "--ngram-dir",
        type=Path,
        default=None,
        help="Directory containing n-gram data (defaults to $ES_LANGUAGE_MODEL_DIR).",
    )
    parser.add_argument(
        "--list-variants",
        action="store_true",
        help="List the supported Spanish variants and exit.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to $LOG_LEVEL or INFO).",
    )
    return parser


def load_user_dictionary(path: Path | None) -> list[str]:
    if path is None:
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


def run_cli(args: argparse.Namespace) -> int:
    profile = SpanishProfile()

    if args.list_variants:
        print(f"{profile.name} variants:")
        for code in profile.language_codes():
            print(f" - {code}")
        return 0

    if not args.documents:
        print("No documents given. Exiting.")
        return 1

    missing = [path for path in args.documents if not path.is_file()]
    if missing:
        for path in missing:
            print(f"Document not found: {path}")
        return 1

    try:
        messages = (
            MessageCatalog.from_file(args.messages, profile.short_code)
            if args.messages
            else MessageCatalog(profile.short_code)
        )
        user_config = UserConfig(user_dictionary=load_user_dictionary(args.user_dictionary))
    except (LanguageProfileError, OSError) as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    ngram_dir = args.ngram_dir or os.environ.get("ES_LANGUAGE_MODEL_DIR")

    with profile:
        language_model = None
        if ngram_dir:
            try:
                language_model = profile.acquire_language_model(ngram_dir)
            except LanguageProfileError as exc:
                LOGGER.warning("Continuing without language model: %s", exc)

        try:
            tool = build_language_tool(
                profile,
                language=args.language,
                user_config=user_config,
                disabled_rules=set(args.disable_rule),
            )
        except ValueError as exc:
            LOGGER.error("%s; see --list-variants", exc)
            return 1
        try:
            reports = run_language_checks(
                args.documents,
                profile=profile,
                tool=tool,
                messages=messages,
                report_path=args.report,
                user_config=user_config,
                language_model=language_model,
            )
        finally:
            tool.close()

    total = sum(len(report.matches) for report in reports)
    print(f"Checked {len(reports)} document(s); {total} issue(s). Report: {args.report}")
    return 0


def main() -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=(args.log_level or os.environ.get("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())
