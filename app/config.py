# app/config.py
"""
Environment-driven settings and logging setup.

``get_settings()`` reads the environment once per process and returns a
frozen ``Settings`` object. Routes receive it through ``Depends`` so tests
can swap in tighter bounds with ``app.dependency_overrides``.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    goodreads_host: str = "www.goodreads.com"
    # Hosts of accepted book links must end with this suffix
    trusted_domain_suffix: str = ".goodreads.com"
    max_response_bytes: int = 2_000_000
    upstream_timeout: int = 10
    user_agent: str = "goodreads-random-picker"
    log_level: str = "INFO"

    default_shelf: str = "to-read"
    min_per_page: int = 1
    max_per_page: int = 200
    default_per_page: int = 200
    min_page: int = 1
    max_page: int = 5
    default_page: int = 1


def _env_str(key: str, default: str) -> str:
    val = os.getenv(key)
    return val.strip() if val and val.strip() else default


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default


def setup_logging(level: str) -> None:
    """Configure the root logger once per process."""
    if getattr(setup_logging, "_configured", False):
        return
    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )
    setup_logging._configured = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = Settings(
        goodreads_host=_env_str("GOODREADS_HOST", Settings.goodreads_host),
        trusted_domain_suffix=_env_str(
            "GOODREADS_DOMAIN_SUFFIX", Settings.trusted_domain_suffix
        ),
        max_response_bytes=_env_int("MAX_RESPONSE_BYTES", Settings.max_response_bytes),
        upstream_timeout=_env_int("UPSTREAM_TIMEOUT", Settings.upstream_timeout),
        user_agent=_env_str("USER_AGENT", Settings.user_agent),
        log_level=_env_str("LOG_LEVEL", Settings.log_level),
    )
    setup_logging(settings.log_level)
    logging.getLogger("config").info(
        "Loaded settings host=%s max_response_bytes=%s timeout=%ss",
        settings.goodreads_host,
        settings.max_response_bytes,
        settings.upstream_timeout,
    )
    return settings
