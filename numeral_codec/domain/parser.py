"""Tolerant parser from transcribed speech back to an integer.

Speech-to-text output mixes digits and words ("5십4", "femtio4"), drops or
adds spaces and leaves stray characters around the number. Parsing runs in
three stages:

1. cleanup and fast paths (pure digits, the zero word, a negative prefix);
2. every digit run is re-spelled in the language, so the scanner only ever
   sees native tokens;
3. the tokens become tagged steps that a single reducer folds over
   ``(total, group_buffer, current)``.

Failure is reported as ``None``. A sum of zero is a failure too: zero is
only produced by the explicit zero word or the digit ``0``. Digit runs
longer than ``MAX_DIGIT_RUN`` are not spoken numbers and fail as well.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from functools import lru_cache, reduce
from typing import Iterable, Optional, Union

from .normalization import (
    MAX_DIGIT_RUN,
    SIGNED_DIGITS_RE,
    clean_transcript,
    compile_token_pattern,
    is_ascii_digits,
    longest_digit_run,
    rewrite_digit_runs,
    scan_tokens,
    strip_spaces,
)
from .profiles import LanguageNumeralProfile
from .serializer import serialize

logger = logging.getLogger("numeral_codec")


@dataclass(frozen=True)
class Digit:
    value: int


@dataclass(frozen=True)
class Unit:
    """A teen or decade word that sets the pending value outright."""

    value: int


@dataclass(frozen=True)
class NonRecursiveMultiplier:
    power: int


@dataclass(frozen=True)
class RecursiveMultiplier:
    power: int


Step = Union[Digit, Unit, NonRecursiveMultiplier, RecursiveMultiplier]


@dataclass(frozen=True)
class ParseState:
    total: int = 0
    group_buffer: int = 0
    current: int = 0
    # Highest recursive tier folded into group_buffer so far.
    top_power: int = 0

    @property
    def value(self) -> int:
        return self.total + self.group_buffer + self.current


def apply_step(state: ParseState, step: Step) -> ParseState:
    if isinstance(step, Digit):
        # Fills the units place, so "tjugo" + "fyra" is 24 while a bare
        # digit simply replaces a previous one.
        return replace(state, current=state.current // 10 * 10 + step.value)
    if isinstance(step, Unit):
        return replace(state, current=step.value)
    if isinstance(step, NonRecursiveMultiplier):
        return replace(
            state,
            total=state.total + (state.current or 1) * 10**step.power,
            current=0,
        )
    if isinstance(step, RecursiveMultiplier):
        scale = 10**step.power
        if state.top_power <= step.power:
            # Nothing so far outranks this tier, so all of it is the
            # multiplicand (만억 = 10^12, 조조 = 10^24).
            kept = 0
        else:
            # Higher groups stay where they are (이억삼천만).
            kept = state.group_buffer - state.group_buffer % scale
        multiplicand = state.group_buffer - kept + state.total + state.current or 1
        return ParseState(
            group_buffer=kept + multiplicand * scale,
            top_power=max(state.top_power, step.power),
        )
    raise TypeError(f"unknown step: {step!r}")


def reduce_steps(steps: Iterable[Step]) -> ParseState:
    return reduce(apply_step, steps, ParseState())


@dataclass(frozen=True)
class _TokenTable:
    steps: dict[str, Step]
    pattern: re.Pattern[str]


@lru_cache(maxsize=None)
def _token_table(profile: LanguageNumeralProfile) -> _TokenTable:
    steps: dict[str, Step] = {}
    for value, tokens in profile.digit_lexicon.items():
        for token in tokens:
            steps[token] = Digit(value)
    for lexicon in (profile.teen_lexicon, profile.decade_lexicon):
        for value, tokens in lexicon.items():
            for token in tokens:
                steps[token] = Unit(value)
    for tier in profile.multiplier_tiers:
        step: Step
        if tier.groups_recursively:
            step = RecursiveMultiplier(tier.power)
        else:
            step = NonRecursiveMultiplier(tier.power)
        for token in tier.tokens():
            steps[token] = step
    if profile.case_insensitive:
        steps = {token.casefold(): step for token, step in steps.items()}
    return _TokenTable(steps=steps, pattern=compile_token_pattern(steps))


def tokenize(profile: LanguageNumeralProfile, text: str) -> list[Step]:
    table = _token_table(profile)
    return [table.steps[token] for token in scan_tokens(text, table.pattern)]


def parse(profile: LanguageNumeralProfile, text: str) -> Optional[int]:
    if not isinstance(text, str):
        return None
    cleaned = clean_transcript(text, casefold=profile.case_insensitive)
    if not cleaned:
        return None

    rest = _strip_negative(profile, cleaned)
    if rest is None:
        return _parse_magnitude(profile, cleaned, text)
    magnitude = _parse_magnitude(profile, rest.strip(), text)
    return -magnitude if magnitude is not None else None


def _strip_negative(profile: LanguageNumeralProfile, cleaned: str) -> Optional[str]:
    """Text after a leading negative word or ASCII minus, or None when unsigned."""
    negative = profile.negative_token
    if negative:
        if profile.case_insensitive:
            negative = negative.casefold()
        if cleaned.startswith(negative):
            return cleaned[len(negative) :]
    match = SIGNED_DIGITS_RE.match(cleaned)
    if match is not None:
        return cleaned[match.end() :]
    return None


def _parse_magnitude(profile: LanguageNumeralProfile, cleaned: str, text: str) -> Optional[int]:
    if not cleaned:
        return None
    compact = strip_spaces(cleaned)
    if longest_digit_run(compact) > MAX_DIGIT_RUN:
        logger.debug("Digit run too long to be a spoken number in %r", text)
        return None
    if is_ascii_digits(compact):
        return int(compact)
    if compact in _zero_tokens(profile):
        return 0

    normalized = rewrite_digit_runs(cleaned, lambda value: serialize(profile, value))
    if profile.case_insensitive:
        normalized = normalized.casefold()
    state = reduce_steps(tokenize(profile, normalized))
    if not state.value:
        logger.debug("No numeral recognized in %r (%s)", text, profile.language_id)
        return None
    return state.value


def _zero_tokens(profile: LanguageNumeralProfile) -> tuple[str, ...]:
    if profile.case_insensitive:
        return tuple(token.casefold() for token in profile.zero_tokens)
    return profile.zero_tokens
