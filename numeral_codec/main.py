"""Command-line entrypoint for converting numbers and parsing transcripts."""
from __future__ import annotations

import argparse
import json
import sys

from .config import load_config
from .errors import NumeralCodecError
from .languages import get_all_languages, get_language
from .logging_config import setup_logging


def _build_parser(default_language: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeral-codec",
        description="Convert integers to spoken numerals and parse transcripts back.",
    )
    parser.add_argument(
        "--language",
        default=default_language,
        help=f"Language id (default: {default_language}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object instead of plain text.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("words", "Spell out a number."),
        ("romanize", "Latin-script pronunciation of a number."),
        ("variations", "List accepted renderings of a number."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("number", type=int)

    parse_command = commands.add_parser("parse", help="Parse a transcript into a number.")
    parse_command.add_argument("text")

    normalize_command = commands.add_parser(
        "normalize", help="Spell out every integer in a piece of text."
    )
    normalize_command.add_argument("text")

    commands.add_parser("languages", help="List supported languages.")
    return parser


def _emit(args: argparse.Namespace, payload: dict[str, object], text: str) -> None:
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(text)


def main(argv: list[str] | None = None) -> int:
    config = load_config()
    logger = setup_logging(config)
    parser = _build_parser(config.default_language)
    args = parser.parse_args(argv)

    if args.command == "languages":
        rows = [
            {"id": language.id, "name": language.name, "romanization": language.has_romanization}
            for language in get_all_languages()
        ]
        _emit(args, {"languages": rows}, "\n".join(f"{row['id']}\t{row['name']}" for row in rows))
        return 0

    try:
        language = get_language(args.language)
        if args.command == "words":
            words = language.number_to_words(args.number)
            _emit(args, {"number": args.number, "words": words}, words)
        elif args.command == "romanize":
            romanized = language.number_to_romanized(args.number)
            _emit(args, {"number": args.number, "romanized": romanized}, romanized)
        elif args.command == "variations":
            found = sorted(language.acceptable_variations(args.number))
            _emit(args, {"number": args.number, "variations": found}, "\n".join(found))
        elif args.command == "parse":
            value = language.parse_spoken_number(args.text)
            if value is None:
                print(f"PARSE_FAILED: no number recognized in {args.text!r}", file=sys.stderr)
                return 1
            _emit(args, {"text": args.text, "number": value}, str(value))
        elif args.command == "normalize":
            normalizer = language.text_normalizer(config.normalize_char_limit)
            normalized = normalizer.preprocess(args.text)
            _emit(args, {"text": args.text, "normalized": normalized}, normalized)
    except NumeralCodecError as exc:
        logger.debug("Command %s failed: %s", args.command, exc)
        print(f"{args.command.upper()}_FAILED: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
