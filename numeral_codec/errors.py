"""Exceptions raised by the language registry and the CLI."""
from __future__ import annotations


class NumeralCodecError(Exception):
    """Base class for numeral codec errors."""


class LanguageNotFoundError(NumeralCodecError, KeyError):
    def __init__(self, language_id: str) -> None:
        super().__init__(language_id)
        self.language_id = language_id

    def __str__(self) -> str:
        return f"Language not found: {self.language_id}"


class RomanizationUnavailableError(NumeralCodecError, LookupError):
    def __init__(self, language_id: str) -> None:
        super().__init__(language_id)
        self.language_id = language_id

    def __str__(self) -> str:
        return f"No romanization for language: {self.language_id}"
