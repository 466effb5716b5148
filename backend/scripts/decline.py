#!/usr/bin/env python3
"""Decline Russian names and words from the command line.

Examples:
    python3 -m scripts.decline fio "Иванов Иван Иванович" --case ДП
    python3 -m scripts.decline word Анна --case ТП --type firstname
    python3 -m scripts.decline phrase "учитель школа" --case РП --type noun
    python3 -m scripts.decline gender Мария --type firstname
    python3 -m scripts.decline paradigm Пётр --type firstname
"""
import argparse
import sys
from pathlib import Path

from core.config import settings
from core.errors import AppError, Err, Ok, Result
from core.logging import configure_logging
from declension import CASE_LABELS, DeclensionEngine, PartType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rule-based declension of Russian names, words and phrases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Case labels: {', '.join(CASE_LABELS)}",
    )
    parser.add_argument("--rules", type=Path, default=settings.RULES_PATH, help="Rule table (JSON or YAML)")
    parser.add_argument("--genders", type=Path, default=settings.GENDER_PATH, help="Gender table (JSON or YAML)")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")

    commands = parser.add_subparsers(dest="command", required=True)

    fio = commands.add_parser("fio", help="Decline 'Surname Given Patronymic'")
    fio.add_argument("name")
    fio.add_argument("--case", "-c", required=True)
    fio.add_argument("--gender", "-g", default="", help="Gender override")

    for name, help_text in (("word", "Decline a single word"), ("phrase", "Decline every word of a phrase")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("text")
        sub.add_argument("--case", "-c", required=True)
        sub.add_argument("--type", "-t", dest="part_type", default=PartType.FIRSTNAME)
        sub.add_argument("--gender", "-g", default="", help="Gender override")

    gender = commands.add_parser("gender", help="Infer gender from the word ending")
    gender.add_argument("text")
    gender.add_argument("--type", "-t", dest="part_type", default=PartType.FIRSTNAME)

    paradigm = commands.add_parser("paradigm", help="Print all six case forms")
    paradigm.add_argument("text")
    paradigm.add_argument("--type", "-t", dest="part_type", default=PartType.FIRSTNAME)

    return parser


def run(engine: DeclensionEngine, args: argparse.Namespace) -> Result[str, AppError]:
    """Execute one sub-command and render its output."""
    match args.command:
        case "fio":
            return engine.decline_full_name(args.name, args.case, args.gender)
        case "word":
            return engine.decline_word(args.text, args.case, args.part_type, args.gender)
        case "phrase":
            return engine.decline_phrase(args.text, args.case, args.part_type, args.gender)
        case "gender":
            return Ok(engine.resolve_gender(args.text, args.part_type) or "unknown")
        case "paradigm":
            return engine.paradigm(args.text, args.part_type).map(
                lambda forms: "\n".join(f"{label}  {form}" for label, form in forms.items())
            )
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    result = DeclensionEngine.initialize(args.rules, args.genders).and_then(
        lambda engine: run(engine, args)
    )
    match result:
        case Ok(output):
            print(output)
            return 0
        case Err(error):
            print(f"Error: {error.message}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
