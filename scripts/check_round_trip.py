from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from numeral_codec.errors import LanguageNotFoundError
from numeral_codec.languages import Language, get_all_languages, get_language


def _sample_values(max_power: int) -> list[int]:
    values = set(range(0, 101))
    values.update(range(0, 1001, 100))
    values.update(range(0, 10001, 1000))
    values.update({5006, 12345, 54321, 99999, 123456789})
    values.update(10**power for power in range(max_power + 1))
    return sorted(values)


def _check_language(language: Language, values: list[int]) -> list[dict[str, object]]:
    failures: list[dict[str, object]] = []
    for value in values:
        words = language.number_to_words(value)
        parsed = language.parse_spoken_number(words)
        if parsed != value:
            failures.append({"number": value, "words": words, "parsed": parsed})
    return failures


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Smoke-check that spelled-out numbers parse back to the same value.",
    )
    parser.add_argument(
        "--language",
        action="append",
        help="Language id to check (repeatable, default: all).",
    )
    parser.add_argument(
        "--max-power",
        type=int,
        default=30,
        help="Also check every power of ten up to 10**N.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON summary at the end.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        languages = (
            [get_language(language_id) for language_id in args.language]
            if args.language
            else get_all_languages()
        )
    except LanguageNotFoundError as exc:
        print(f"ROUND_TRIP_FAILED: {exc}", file=sys.stderr)
        return 1

    values = _sample_values(args.max_power)
    summary: dict[str, object] = {"checked": len(values), "languages": {}}
    failed = False
    for language in languages:
        failures = _check_language(language, values)
        summary["languages"][language.id] = failures
        if failures:
            failed = True
            print(f"ROUND_TRIP_FAILED language={language.id} failures={len(failures)}", file=sys.stderr)
        else:
            print(f"ROUND_TRIP_OK language={language.id} values={len(values)}")

    if args.json:
        print(json.dumps(summary, ensure_ascii=False, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
