"""Centralised settings for the link checker.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source page fetch
    # ------------------------------------------------------------------
    page_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PAGE_TIMEOUT", "10.0"))
    )
    page_user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PAGE_USER_AGENT", "SEO-Broken-Links-Checker/1.0"
        )
    )

    # ------------------------------------------------------------------
    # Link probes (HEAD first, then GET)
    # ------------------------------------------------------------------
    probe_user_agent: str = field(
        default_factory=lambda: os.environ.get("PROBE_USER_AGENT", "SEO-Link-Checker/1.0")
    )
    head_timeout: float = field(
        default_factory=lambda: float(os.environ.get("HEAD_TIMEOUT", "5.0"))
    )
    head_max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("HEAD_MAX_REDIRECTS", "5"))
    )
    get_timeout: float = field(
        default_factory=lambda: float(os.environ.get("GET_TIMEOUT", "3.0"))
    )
    get_max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("GET_MAX_REDIRECTS", "3"))
    )

    # ------------------------------------------------------------------
    # Limits
    # ------------------------------------------------------------------
    max_links_to_check: int = field(
        default_factory=lambda: int(os.environ.get("MAX_LINKS_TO_CHECK", "50"))
    )
    max_broken_reported: int = field(
        default_factory=lambda: int(os.environ.get("MAX_BROKEN_REPORTED", "20"))
    )


@dataclass(frozen=True)
class ProbeConfig:
    """Everything a single link probe needs, built once per audit."""

    user_agent: str
    head_timeout: float
    head_max_redirects: int
    get_timeout: float
    get_max_redirects: int

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "ProbeConfig":
        source = source or settings
        return cls(
            user_agent=source.probe_user_agent,
            head_timeout=source.head_timeout,
            head_max_redirects=source.head_max_redirects,
            get_timeout=source.get_timeout,
            get_max_redirects=source.get_max_redirects,
        )


# Module-level singleton — import this everywhere:
#   from linkcheck.config import settings
settings = Settings()
