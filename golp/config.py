from __future__ import annotations
import os
from typing import Optional


_TRUTHY = frozenset({"1", "true", "yes", "on"})

# Defaults
_DEFAULT_PROMPT = ">>> "
_DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def is_strict() -> bool:
    """True when unbound symbols should raise instead of evaluating to nil."""
    return flag_from_env('GOLP_STRICT')


def get_prompt() -> str:
    return os.environ.get('GOLP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('GOLP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()


def get_recursion_limit() -> Optional[int]:
    return int_from_env('GOLP_RECURSION_LIMIT')
