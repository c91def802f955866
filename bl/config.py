from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from bl.errors import BlError


@dataclass(frozen=True)
class Settings:
    prompt: str = "* "
    continuation_prompt: str = ""
    log_level: str = "WARNING"
    recursion_limit: Optional[int] = None


def _int_from_env(environ: Mapping[str, str], var: str) -> Optional[int]:
    raw = environ.get(var)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise BlError(f"{var} must be an integer, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from BL_* environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        prompt=env.get("BL_PROMPT", defaults.prompt),
        continuation_prompt=env.get("BL_CONTINUATION_PROMPT", defaults.continuation_prompt),
        log_level=env.get("BL_LOG_LEVEL", defaults.log_level).upper(),
        recursion_limit=_int_from_env(env, "BL_RECURSION_LIMIT"),
    )
