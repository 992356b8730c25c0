"""Registry of supported languages and their numeral entry points."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .config import DEFAULT_LANGUAGE_ID
from .domain.lexicons import SINO_KOREAN, SWEDISH
from .domain.normalization import TextNormalizer
from .domain.parser import parse
from .domain.profiles import LanguageNumeralProfile
from .domain.romanization import romanize
from .domain.serializer import serialize
from .domain.variations import variations
from .errors import LanguageNotFoundError, RomanizationUnavailableError


@dataclass(frozen=True)
class Language:
    id: str
    name: str
    tts_language_code: str
    stt_language_code: str
    flag: str
    profile: LanguageNumeralProfile

    @property
    def has_romanization(self) -> bool:
        return self.profile.romanization is not None

    def number_to_words(self, n: int) -> str:
        """Spoken form used for TTS and on-screen hints, e.g. 54 -> 오십사."""
        return serialize(self.profile, n)

    def parse_spoken_number(self, text: str) -> Optional[int]:
        """Recover a number from an STT transcript; ``None`` means no match."""
        return parse(self.profile, text)

    def acceptable_variations(self, n: int) -> set[str]:
        return variations(self.profile, n)

    def number_to_romanized(self, n: int) -> str:
        if not self.has_romanization:
            raise RomanizationUnavailableError(self.id)
        return romanize(self.profile, n)

    def text_normalizer(self, char_limit: Optional[int] = None) -> TextNormalizer:
        return TextNormalizer(self.number_to_words, char_limit=char_limit)


SINO_KOREAN_LANGUAGE = Language(
    id="sino-korean",
    name="Sino-Korean",
    tts_language_code="ko-KR",
    stt_language_code="ko-KR",
    flag="\U0001f1f0\U0001f1f7",
    profile=SINO_KOREAN,
)

SWEDISH_LANGUAGE = Language(
    id="swedish",
    name="Swedish",
    tts_language_code="sv-SE",
    stt_language_code="sv-SE",
    flag="\U0001f1f8\U0001f1ea",
    profile=SWEDISH,
)

LANGUAGES: Mapping[str, Language] = MappingProxyType(
    {
        SINO_KOREAN_LANGUAGE.id: SINO_KOREAN_LANGUAGE,
        SWEDISH_LANGUAGE.id: SWEDISH_LANGUAGE,
    }
)


def get_language(language_id: str) -> Language:
    try:
        return LANGUAGES[language_id]
    except KeyError:
        raise LanguageNotFoundError(language_id) from None


def get_language_ids() -> list[str]:
    return list(LANGUAGES)


def get_all_languages() -> list[Language]:
    return list(LANGUAGES.values())


def get_default_language() -> Language:
    return get_language(DEFAULT_LANGUAGE_ID)
