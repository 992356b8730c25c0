"""Numeral profiles for the supported languages."""
from __future__ import annotations

from .profiles import LanguageNumeralProfile, MultiplierTier

# Sino-Korean groups by 만 (10^4): 만, 억 and 조 take a full sub-number as
# multiplicand, 십/백/천 take a single digit.
SINO_KOREAN_ROMANIZED = LanguageNumeralProfile(
    language_id="sino-korean-romanized",
    digit_lexicon={
        0: "yeong",
        1: "il",
        2: "i",
        3: "sam",
        4: "sa",
        5: "o",
        6: "yuk",
        7: "chil",
        8: "pal",
        9: "gu",
    },
    multiplier_tiers=(
        MultiplierTier(12, "jo", groups_recursively=True),
        MultiplierTier(8, "eok", groups_recursively=True),
        MultiplierTier(4, "man", groups_recursively=True),
        MultiplierTier(3, "cheon"),
        MultiplierTier(2, "baek"),
        MultiplierTier(1, "sip"),
    ),
    negative_token="maineo-seu",
    joiner="-",
    case_insensitive=True,
)

SINO_KOREAN = LanguageNumeralProfile(
    language_id="sino-korean",
    digit_lexicon={
        0: ("영", "공"),
        1: "일",
        2: "이",
        3: "삼",
        4: "사",
        5: "오",
        6: "육",
        7: "칠",
        8: "팔",
        9: "구",
    },
    multiplier_tiers=(
        MultiplierTier(12, "조", groups_recursively=True),
        MultiplierTier(8, "억", groups_recursively=True),
        MultiplierTier(4, "만", groups_recursively=True),
        MultiplierTier(3, "천"),
        MultiplierTier(2, "백"),
        MultiplierTier(1, "십"),
    ),
    negative_token="마이너스",
    romanization=SINO_KOREAN_ROMANIZED,
)

# Swedish groups by thousands. Numbers below a million are written as one
# compound word; miljon and up are separate words with "en" for one.
SWEDISH = LanguageNumeralProfile(
    language_id="swedish",
    digit_lexicon={
        0: "noll",
        1: ("ett", "en"),
        2: "två",
        3: "tre",
        4: "fyra",
        5: "fem",
        6: "sex",
        7: "sju",
        8: "åtta",
        9: "nio",
    },
    teen_lexicon={
        10: "tio",
        11: "elva",
        12: "tolv",
        13: "tretton",
        14: "fjorton",
        15: "femton",
        16: "sexton",
        17: "sjutton",
        18: "arton",
        19: "nitton",
    },
    decade_lexicon={
        20: "tjugo",
        30: "trettio",
        40: "fyrtio",
        50: "femtio",
        60: "sextio",
        70: "sjuttio",
        80: "åttio",
        90: "nittio",
    },
    multiplier_tiers=(
        MultiplierTier(
            12,
            "biljon",
            groups_recursively=True,
            plural_token="biljoner",
            explicit_one="en",
            spaced=True,
        ),
        MultiplierTier(
            9,
            "miljard",
            groups_recursively=True,
            plural_token="miljarder",
            explicit_one="en",
            spaced=True,
        ),
        MultiplierTier(
            6,
            "miljon",
            groups_recursively=True,
            plural_token="miljoner",
            explicit_one="en",
            spaced=True,
        ),
        MultiplierTier(3, "tusen", groups_recursively=True),
        MultiplierTier(2, "hundra"),
    ),
    negative_token="minus",
    case_insensitive=True,
)
