"""Numeral codec domain: profiles, serializer, romanizer and parser."""

from .lexicons import SINO_KOREAN, SINO_KOREAN_ROMANIZED, SWEDISH
from .normalization import TextNormalizer, clean_transcript, normalize_numbers
from .parser import (
    Digit,
    NonRecursiveMultiplier,
    ParseState,
    RecursiveMultiplier,
    Unit,
    apply_step,
    parse,
    reduce_steps,
    tokenize,
)
from .profiles import LanguageNumeralProfile, MultiplierTier
from .romanization import romanize
from .serializer import serialize, serialize_pieces
from .variations import variations

__all__ = [
    "Digit",
    "LanguageNumeralProfile",
    "MultiplierTier",
    "NonRecursiveMultiplier",
    "ParseState",
    "RecursiveMultiplier",
    "SINO_KOREAN",
    "SINO_KOREAN_ROMANIZED",
    "SWEDISH",
    "TextNormalizer",
    "Unit",
    "apply_step",
    "clean_transcript",
    "normalize_numbers",
    "parse",
    "reduce_steps",
    "romanize",
    "serialize",
    "serialize_pieces",
    "tokenize",
    "variations",
]
