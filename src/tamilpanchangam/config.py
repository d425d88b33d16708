"""Process configuration read from the environment (after load_dotenv at the entry points)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MODEL = "claude-sonnet-4-6"
DEFAULT_MAX_TOKENS = 4096


@dataclass(frozen=True)
class Settings:
    api_key: str | None  # None -> the API call fails, surfaced as the generic error
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    default_region: str = "Chennai"
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (defaults to os.environ).

    Raises:
        ValueError: If PANCHANGAM_MAX_TOKENS is not an integer.
    """
    env = os.environ if environ is None else environ
    return Settings(
        api_key=env.get("ANTHROPIC_API_KEY") or None,
        model=env.get("PANCHANGAM_MODEL") or DEFAULT_MODEL,
        max_tokens=int(env.get("PANCHANGAM_MAX_TOKENS") or DEFAULT_MAX_TOKENS),
        default_region=env.get("PANCHANGAM_DEFAULT_REGION") or "Chennai",
        log_level=(env.get("PANCHANGAM_LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup for the app and CLI. No-op if handlers already exist."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
