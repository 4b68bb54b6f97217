"""Centralised settings for the Page Inspector backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source page fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "INSPECTOR_USER_AGENT",
            "Mozilla/5.0 (compatible; PageInspector/1.0; +https://github.com/page-inspector)",
        )
    )
    # CSS selector of the region kept when the surrounding template chrome
    # (header/footer shell) is excluded.
    primary_content_selector: str = field(
        default_factory=lambda: os.environ.get(
            "PRIMARY_CONTENT_SELECTOR", "main.microsoft-template-layout-container"
        )
    )

    # ------------------------------------------------------------------
    # Link probes
    # ------------------------------------------------------------------
    probe_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PROBE_TIMEOUT", "10.0"))
    )
    # Maximum number of probes in flight per batch; 0 or less disables the cap.
    probe_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("PROBE_CONCURRENCY", "16"))
    )

    # ------------------------------------------------------------------
    # HTTP API
    # ------------------------------------------------------------------
    api_host: str = field(
        default_factory=lambda: os.environ.get("API_HOST", "127.0.0.1")
    )
    api_port: int = field(
        default_factory=lambda: int(os.environ.get("API_PORT", "5000"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at *level* (defaults to ``settings.log_level``)."""
    logger.remove()
    logger.add(sys.stderr, level=level or settings.log_level)


# Module-level singleton — import this everywhere:
#   from backend.config import settings
settings = Settings()
