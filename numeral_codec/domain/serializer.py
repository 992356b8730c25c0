"""Integer to numeral words.

Tiers are walked from the largest down. A multiplicand of exactly one is
elided (100 -> 백, not 일백) unless the tier names an explicit "one"
(Swedish ``en miljon``). Tiers whose count is zero emit nothing, so 5006
is 오천육 with no placeholder for the empty hundreds and tens.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from .profiles import LanguageNumeralProfile, MultiplierTier

Piece = tuple[str, Optional[MultiplierTier]]


def serialize(profile: LanguageNumeralProfile, n: int) -> str:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return _serialize_cached(profile, n)


@lru_cache(maxsize=10000)
def _serialize_cached(profile: LanguageNumeralProfile, n: int) -> str:
    if n == 0:
        return profile.zero_token
    if n < 0:
        magnitude = _serialize_cached(profile, -n)
        if profile.negative_token is None:
            return f"-{magnitude}"
        return f"{profile.negative_token} {magnitude}"
    return join_pieces(profile, serialize_pieces(profile, n))


def serialize_pieces(profile: LanguageNumeralProfile, n: int) -> list[Piece]:
    """Split a positive value into rendered tier pieces, largest first.

    Each piece is paired with the tier that produced it; the trailing
    sub-tier remainder is paired with ``None``.
    """
    pieces: list[Piece] = []
    remaining = n
    for tier in profile.multiplier_tiers:
        if remaining < tier.value:
            continue
        count, remaining = divmod(remaining, tier.value)
        pieces.append((_render_tier(profile, tier, count), tier))
    if remaining:
        pieces.append((_render_below_tiers(profile, remaining), None))
    return pieces


def join_pieces(profile: LanguageNumeralProfile, pieces: list[Piece]) -> str:
    parts: list[str] = []
    previous: Optional[MultiplierTier] = None
    for index, (text, tier) in enumerate(pieces):
        if index:
            parts.append(" " if previous is not None and previous.spaced else profile.joiner)
        parts.append(text)
        previous = tier
    return "".join(parts)


def _render_tier(profile: LanguageNumeralProfile, tier: MultiplierTier, count: int) -> str:
    word = tier.word_for(count)
    if count == 1:
        prefix = tier.explicit_one or ""
    elif tier.groups_recursively:
        prefix = _serialize_cached(profile, count)
    else:
        prefix = profile.digit_token(count)
    if not prefix:
        return word
    separator = " " if tier.spaced else profile.joiner
    return f"{prefix}{separator}{word}"


def _render_below_tiers(profile: LanguageNumeralProfile, value: int) -> str:
    if value < 10:
        return profile.digit_token(value)
    if value < 20:
        return profile.teen_lexicon[value][0]
    decade, unit = divmod(value, 10)
    word = profile.decade_lexicon[decade * 10][0]
    if unit:
        word = f"{word}{profile.joiner}{profile.digit_token(unit)}"
    return word
