"""Spoken numeral codec: integers to words and noisy transcripts back to integers."""

from .errors import LanguageNotFoundError, NumeralCodecError, RomanizationUnavailableError
from .languages import Language, get_all_languages, get_language, get_language_ids

__all__ = [
    "Language",
    "LanguageNotFoundError",
    "NumeralCodecError",
    "RomanizationUnavailableError",
    "get_all_languages",
    "get_language",
    "get_language_ids",
]
