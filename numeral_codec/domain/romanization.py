"""Latin-script pronunciation hints, e.g. 54 -> "o-sip-sa"."""
from __future__ import annotations

import re

from ..errors import RomanizationUnavailableError
from .profiles import LanguageNumeralProfile
from .serializer import serialize


def romanize(profile: LanguageNumeralProfile, n: int) -> str:
    """Render ``n`` with the profile's romanized tokens.

    Pieces are joined with the romanization's joiner; doubled joiners are
    collapsed and leading or trailing ones trimmed.
    """
    romanized = profile.romanization
    if romanized is None:
        raise RomanizationUnavailableError(profile.language_id)
    text = serialize(romanized, n)
    joiner = romanized.joiner
    if not joiner:
        return text
    escaped = re.escape(joiner)
    text = re.sub(f"(?:{escaped}){{2,}}", joiner, text)
    return re.sub(f"^(?:{escaped})+|(?:{escaped})+$", "", text)
