"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .utils import env_flag, env_str, parse_int_env, resolve_path

DEFAULT_LANGUAGE_ID = "sino-korean"
PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
MAX_NORMALIZE_CHAR_LIMIT = 100000


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    log_to_file: bool
    default_language: str
    # None disables truncation in TextNormalizer.
    normalize_char_limit: Optional[int] = None


def _log_file_name() -> str:
    return f"numeral_codec_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"


def load_config() -> AppConfig:
    log_to_file = env_flag("LOG_TO_FILE")
    log_dir = resolve_path(env_str("LOG_DIR", "logs"), PROJECT_ROOT)
    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
    char_limit = parse_int_env(
        "NORMALIZE_CHAR_LIMIT",
        0,
        min_value=0,
        max_value=MAX_NORMALIZE_CHAR_LIMIT,
    )
    return AppConfig(
        log_level=env_str("LOG_LEVEL", "INFO").upper(),
        file_log_level=env_str("FILE_LOG_LEVEL", "DEBUG").upper(),
        log_dir=log_dir,
        log_file=os.path.join(log_dir, _log_file_name()),
        log_to_file=log_to_file,
        default_language=env_str("NUMERAL_LANGUAGE", DEFAULT_LANGUAGE_ID).lower(),
        normalize_char_limit=char_limit or None,
    )
