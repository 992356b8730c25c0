"""Transcript cleanup, tokenization and number normalization for running text."""
from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Iterator, Optional

logger = logging.getLogger("numeral_codec")

WHITESPACE_RE = re.compile(r"\s+")
DIGIT_RUN_RE = re.compile(r"[0-9]+")
DIGIT_RE = re.compile(r"[0-9]")
# Integers in prose, optionally with thousands commas; decimals are left alone.
TEXT_INT_RE = re.compile(r"(?<![0-9,.])([0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)(?![0-9]|[.,][0-9])")
# ASCII minus written in front of digits, e.g. "-5" or "- 12".
SIGNED_DIGITS_RE = re.compile(r"-\s*(?=[0-9])")

# Longer digit runs are noise, not numbers anyone says aloud.
MAX_DIGIT_RUN = 100


def clean_transcript(text: str, *, casefold: bool = False) -> str:
    """Trim and collapse whitespace runs to single spaces."""
    cleaned = WHITESPACE_RE.sub(" ", text).strip()
    return cleaned.casefold() if casefold else cleaned


def strip_spaces(text: str) -> str:
    return text.replace(" ", "")


def is_ascii_digits(text: str) -> bool:
    return DIGIT_RUN_RE.fullmatch(text) is not None


def longest_digit_run(text: str) -> int:
    return max((len(run) for run in DIGIT_RUN_RE.findall(text)), default=0)


def rewrite_digit_runs(text: str, to_words: Callable[[int], str]) -> str:
    """Replace every ASCII digit run with its word form."""
    if not DIGIT_RE.search(text):
        return text
    rewritten = DIGIT_RUN_RE.sub(lambda match: to_words(int(match.group(0))), text)
    logger.debug("Rewrote digit runs: %r -> %r", text, rewritten)
    return rewritten


def compile_token_pattern(tokens: Iterable[str]) -> re.Pattern[str]:
    # Alternation tries branches in order, so longest-first gives longest match.
    ordered = sorted(set(tokens), key=lambda token: (-len(token), token))
    return re.compile("|".join(re.escape(token) for token in ordered))


def scan_tokens(text: str, pattern: re.Pattern[str]) -> Iterator[str]:
    """Yield lexicon tokens left to right, skipping characters that match nothing."""
    position = 0
    length = len(text)
    while position < length:
        match = pattern.match(text, position)
        if match is None or match.end() == position:
            position += 1
            continue
        yield match.group(0)
        position = match.end()


def normalize_numbers(text: str, to_words: Callable[[int], str]) -> str:
    """Spell out integers in running text, e.g. for TTS input.

    Runs longer than ``MAX_DIGIT_RUN`` digits are left as they are.
    """
    if not DIGIT_RE.search(text):
        return text
    replacements = 0

    def repl(match: re.Match[str]) -> str:
        nonlocal replacements
        digits = match.group(1).replace(",", "")
        if len(digits) > MAX_DIGIT_RUN:
            return match.group(0)
        replacements += 1
        return to_words(int(digits))

    updated = TEXT_INT_RE.sub(repl, text)
    if replacements:
        logger.debug("Normalized numbers: %s", replacements)
    return updated


class TextNormalizer:
    """Applies a character limit and number normalization for one language."""

    def __init__(self, to_words: Callable[[int], str], char_limit: Optional[int] = None) -> None:
        self.to_words = to_words
        self.char_limit = char_limit

    def preprocess(
        self,
        text: str,
        normalize_numbers_enabled: bool = True,
        apply_char_limit: bool = True,
    ) -> str:
        if apply_char_limit and self.char_limit is not None:
            text = text.strip()[: self.char_limit]
        if normalize_numbers_enabled:
            text = normalize_numbers(text, self.to_words)
        return text
