"""Environment parsing helpers."""
from __future__ import annotations

import os
from typing import Optional

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def resolve_path(value: str, base_dir: str) -> str:
    """Join value onto base_dir unless it is already absolute."""
    return value if os.path.isabs(value) else os.path.join(base_dir, value)


def env_str(name: str, default: str) -> str:
    """Stripped environment value; blank or unset falls back to default."""
    return os.getenv(name, "").strip() or default


def parse_int_env(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Integer environment value clamped into [min_value, max_value].

    Unset, blank and non-numeric values use ``default``.
    """
    try:
        value = int(env_str(name, ""))
    except ValueError:
        value = default
    if min_value is not None and value < min_value:
        return min_value
    if max_value is not None and value > max_value:
        return max_value
    return value


def env_flag(name: str, default: str = "0") -> bool:
    return env_str(name, default).lower() in _TRUE_VALUES
