"""Environment-driven settings. Call ``load_dotenv()`` before ``Settings.from_env()``."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class Settings:
    lexicon_path: Optional[str] = None
    emoji_path: Optional[str] = None
    strict_load: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            lexicon_path=os.getenv("SENTIMENT_LEXICON_PATH") or None,
            emoji_path=os.getenv("SENTIMENT_EMOJI_PATH") or None,
            strict_load=_env_flag("SENTIMENT_STRICT_LOAD", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "5000")),
        )
