"""Client configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.groq.com/openai/v1/audio/transcriptions"
DEFAULT_TIMEOUT_SECONDS = 300.0


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, api_key: str | None = None) -> "ClientConfig":
        """
        Build a config from api_key (or GROQ_API_KEY), WHISPER_API_URL and WHISPER_TIMEOUT_SECONDS.

        Raises:
            ValueError: If GROQ_API_KEY is missing or blank
        """
        if api_key is None:
            api_key = os.getenv("GROQ_API_KEY", "")
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("GROQ_API_KEY is required for the Whisper client")

        api_url = os.getenv("WHISPER_API_URL", "").strip() or DEFAULT_API_URL
        return cls(api_key=api_key, api_url=api_url, timeout=_get_timeout_seconds())


def _get_timeout_seconds() -> float:
    raw = os.getenv("WHISPER_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)).strip()
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid WHISPER_TIMEOUT_SECONDS=%r; defaulting to %s", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
