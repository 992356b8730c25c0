"""Declarative numeral lexicons: digit tables and multiplier tiers per language.

A profile carries no behaviour beyond validating itself on construction.
The serializer, parser and romanizer all take a profile as an explicit
argument, so any number of languages can be used side by side.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

DIGIT_VALUES = tuple(range(10))
TEEN_VALUES = tuple(range(10, 20))
DECADE_VALUES = tuple(range(20, 100, 10))


@dataclass(frozen=True)
class MultiplierTier:
    power: int
    token: str
    groups_recursively: bool = False
    plural_token: Optional[str] = None
    explicit_one: Optional[str] = None
    spaced: bool = False
    aliases: tuple[str, ...] = ()

    @property
    def value(self) -> int:
        return 10**self.power

    def word_for(self, count: int) -> str:
        if count != 1 and self.plural_token:
            return self.plural_token
        return self.token

    def tokens(self) -> tuple[str, ...]:
        extra = (self.plural_token,) if self.plural_token else ()
        return (self.token, *extra, *self.aliases)


def _freeze_lexicon(
    lexicon: Mapping[int, tuple[str, ...] | str],
) -> Mapping[int, tuple[str, ...]]:
    frozen: dict[int, tuple[str, ...]] = {}
    for value, tokens in lexicon.items():
        if isinstance(tokens, str):
            tokens = (tokens,)
        frozen[int(value)] = tuple(tokens)
    return MappingProxyType(frozen)


@dataclass(frozen=True, eq=False)
class LanguageNumeralProfile:
    """Immutable numeral configuration for one language.

    ``digit_lexicon`` maps 0-9 to accepted tokens, canonical token first.
    ``multiplier_tiers`` must be strictly descending by power. Languages that
    do not name tens with a multiplier (Swedish ``tjugo``, ``trettio``) supply
    ``teen_lexicon`` and ``decade_lexicon`` for values below their lowest tier.

    Profiles compare and hash by identity; the serializer cache relies on it.
    """

    language_id: str
    digit_lexicon: Mapping[int, tuple[str, ...]]
    multiplier_tiers: tuple[MultiplierTier, ...]
    negative_token: Optional[str] = None
    teen_lexicon: Mapping[int, tuple[str, ...]] = field(default_factory=dict)
    decade_lexicon: Mapping[int, tuple[str, ...]] = field(default_factory=dict)
    joiner: str = ""
    case_insensitive: bool = False
    romanization: Optional["LanguageNumeralProfile"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "digit_lexicon", _freeze_lexicon(self.digit_lexicon))
        object.__setattr__(self, "teen_lexicon", _freeze_lexicon(self.teen_lexicon))
        object.__setattr__(self, "decade_lexicon", _freeze_lexicon(self.decade_lexicon))
        object.__setattr__(self, "multiplier_tiers", tuple(self.multiplier_tiers))
        self._validate()

    @property
    def zero_token(self) -> str:
        return self.digit_lexicon[0][0]

    @property
    def zero_tokens(self) -> tuple[str, ...]:
        return self.digit_lexicon[0]

    @property
    def lowest_tier(self) -> Optional[MultiplierTier]:
        return self.multiplier_tiers[-1] if self.multiplier_tiers else None

    def digit_token(self, value: int) -> str:
        return self.digit_lexicon[value][0]

    def tier_for_power(self, power: int) -> Optional[MultiplierTier]:
        for tier in self.multiplier_tiers:
            if tier.power == power:
                return tier
        return None

    def iter_tokens(self) -> Iterator[str]:
        for lexicon in (self.digit_lexicon, self.teen_lexicon, self.decade_lexicon):
            for tokens in lexicon.values():
                yield from tokens
        for tier in self.multiplier_tiers:
            yield from tier.tokens()

    def _validate(self) -> None:
        missing = [value for value in DIGIT_VALUES if not self.digit_lexicon.get(value)]
        if missing:
            raise ValueError(f"{self.language_id}: digit lexicon is missing values {missing}")

        powers = [tier.power for tier in self.multiplier_tiers]
        if any(power < 1 for power in powers):
            raise ValueError(f"{self.language_id}: tier powers must be positive")
        if any(higher <= lower for higher, lower in zip(powers, powers[1:])):
            raise ValueError(f"{self.language_id}: tiers must be strictly descending by power")

        # A single digit prefix only fits when the next tier up is one power higher.
        for index, tier in enumerate(self.multiplier_tiers):
            if tier.groups_recursively:
                continue
            if index == 0 or self.multiplier_tiers[index - 1].power != tier.power + 1:
                raise ValueError(
                    f"{self.language_id}: non-recursive tier {tier.token!r} needs a tier "
                    f"at power {tier.power + 1} above it"
                )

        lowest = powers[-1] if powers else None
        if lowest is None or lowest > 2:
            raise ValueError(f"{self.language_id}: lowest tier must be tens or hundreds")
        if lowest == 2:
            if set(self.teen_lexicon) != set(TEEN_VALUES):
                raise ValueError(f"{self.language_id}: teen lexicon must cover 10-19")
            if set(self.decade_lexicon) != set(DECADE_VALUES):
                raise ValueError(f"{self.language_id}: decade lexicon must cover 20-90")

        seen: set[str] = set()
        for token in self.iter_tokens():
            key = token.casefold() if self.case_insensitive else token
            if not key.strip():
                raise ValueError(f"{self.language_id}: empty token")
            if key in seen:
                raise ValueError(f"{self.language_id}: duplicate token {token!r}")
            seen.add(key)
        if self.negative_token and self.negative_token in seen:
            raise ValueError(f"{self.language_id}: negative token collides with the lexicon")
