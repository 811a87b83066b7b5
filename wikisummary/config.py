# wikisummary/config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class Settings:
    language: str = "en"
    user_agent: str = "WikiSummary/1.0"
    timeout: float = 10.0
    fill_column: int = 70
    port: int = 5002
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            language=os.getenv("WIKI_LANGUAGE", "en"),
            user_agent=os.getenv("USER_AGENT", "WikiSummary/1.0"),
            timeout=_env_float("HTTP_TIMEOUT", 10.0),
            fill_column=_env_int("FILL_COLUMN", 70),
            port=_env_int("PORT", 5002),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
