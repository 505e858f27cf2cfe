# fitsense/config.py

import logging
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Config: invalid value for {name}={raw!r}, using default {default}")
        return default


class Settings:
    """Runtime settings read from the environment (and .env)"""

    def __init__(self):
        # Groq (advice service)
        self.GROQ_API_KEY = os.getenv("GROQ_API_KEY")
        self.GROQ_MODEL = os.getenv("GROQ_MODEL") or "llama-3.3-70b-versatile"
        self.ADVICE_TEMPERATURE = _env_float("ADVICE_TEMPERATURE", 0.7)
        self.ADVICE_MAX_TOKENS = int(_env_float("ADVICE_MAX_TOKENS", 512))
        self.ADVICE_TIMEOUT_SECONDS = _env_float("ADVICE_TIMEOUT_SECONDS", 20.0)

        # Minimum time a calculation takes, 0 disables padding
        self.MIN_CALCULATION_SECONDS = max(0.0, _env_float("MIN_CALCULATION_SECONDS", 0.0))

        # Session cookie (holds the per-browser theme preference)
        self.SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-this")
        self.SESSION_MAX_AGE = int(_env_float("SESSION_MAX_AGE_DAYS", 365) * 24 * 60 * 60)

        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
