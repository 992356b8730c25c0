"""Alternate renderings accepted when matching a spoken answer."""
from __future__ import annotations

from .profiles import LanguageNumeralProfile
from .serializer import serialize, serialize_pieces


def variations(profile: LanguageNumeralProfile, n: int) -> set[str]:
    """Return the canonical words, the digit string and known alternates.

    Alternates cover a space after each grouping word (만 / tusen), a space
    between every piece, every accepted token for a single digit (공, en),
    and the explicit-one decade form (일십) where tens are a multiplier.
    """
    canonical = serialize(profile, n)
    found = {canonical, str(n)}
    if n <= 0:
        if n == 0:
            found.update(profile.zero_tokens)
        return found

    if n < 10:
        found.update(profile.digit_lexicon[n])

    pieces = serialize_pieces(profile, n)
    grouped: list[str] = []
    for text, tier in pieces:
        grouped.append(text)
        grouped.append(" " if tier is not None and tier.groups_recursively else profile.joiner)
    found.add(" ".join("".join(grouped).split()))
    found.add(" ".join(" ".join(text for text, _ in pieces).split()))

    tens_tier = profile.tier_for_power(1)
    if tens_tier is not None and n % 10 == 0 and 10 <= n <= 90:
        found.add(f"{profile.digit_token(n // 10)}{profile.joiner}{tens_tier.token}")
    return found
