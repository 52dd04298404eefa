"""
Configuration loading utilities.

Loads environment variables from `.env`, validates values, and ensures the
local data directory exists. Secrets are never logged.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, find_dotenv
from streamlit.logger import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_SEC = 15.0
DEFAULT_CACHE_TTL_SEC = 30.0
SUPPORTED_LANGUAGES = ("es", "en")


@dataclass(frozen=True)
class Config:
    api_url: str
    data_dir: Path
    sessions_dir: Path
    encryption_key: Optional[str]
    request_timeout: float
    default_language: str
    cache_ttl: float


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _positive_float(raw: Optional[str], default: float) -> float:
    try:
        value = float(raw) if raw not in (None, "") else default
    except (ValueError, TypeError):
        return default
    return value if value > 0 else default


def load_config() -> Config:
    """Load configuration from environment and provision directories."""
    load_dotenv(find_dotenv(), override=True)

    api_url = (os.getenv("API_URL") or DEFAULT_API_URL).rstrip("/")
    data_dir = Path(os.getenv("DATA_DIR", "./data")).expanduser().resolve()
    encryption_key = os.getenv("ENCRYPTION_KEY") or None
    request_timeout = _positive_float(os.getenv("REQUEST_TIMEOUT"), DEFAULT_TIMEOUT_SEC)
    cache_ttl = _positive_float(os.getenv("CACHE_TTL"), DEFAULT_CACHE_TTL_SEC)

    language = (os.getenv("DEFAULT_LANGUAGE") or "es").strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        logger.warning("Unsupported DEFAULT_LANGUAGE %r, falling back to 'es'", language)
        language = "es"

    logger.debug("API_URL: %s", api_url)
    logger.debug("ENCRYPTION_KEY: %s", redact(encryption_key))

    _ensure_dir(data_dir)

    return Config(
        api_url=api_url,
        data_dir=data_dir,
        sessions_dir=data_dir / "sessions",
        encryption_key=encryption_key,
        request_timeout=request_timeout,
        default_language=language,
        cache_ttl=cache_ttl,
    )


def redact(value: Optional[str], keep_last: int = 4) -> str:
    """Return a redacted string suitable for logs (never log raw secrets)."""
    if not value:
        return ""
    if len(value) <= keep_last:
        return "***"
    return "***" + value[-keep_last:]
