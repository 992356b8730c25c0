"""Shared fixtures for the numeral codec tests."""

from __future__ import annotations

import pytest

from numeral_codec.domain.lexicons import SINO_KOREAN, SWEDISH


@pytest.fixture
def korean():
    return SINO_KOREAN


@pytest.fixture
def swedish():
    return SWEDISH


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "FILE_LOG_LEVEL",
        "LOG_DIR",
        "LOG_TO_FILE",
        "NUMERAL_LANGUAGE",
        "NORMALIZE_CHAR_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)
