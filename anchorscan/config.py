"""Centralised settings for anchorscan.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  Command-line options
take precedence over anything set here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() not in _FALSY


def _env_path_or_none(name: str) -> Optional[Path]:
    value = os.environ.get(name, "").strip()
    return Path(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # URL prompt
    # ------------------------------------------------------------------
    max_url_attempts: int = field(
        default_factory=lambda: int(os.environ.get("ANCHORSCAN_MAX_ATTEMPTS", "5"))
    )

    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    browser_executable: Optional[Path] = field(
        default_factory=lambda: _env_path_or_none("ANCHORSCAN_BROWSER_PATH")
    )
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("ANCHORSCAN_NAV_TIMEOUT", "30.0"))
    )
    viewport_width: int = field(
        default_factory=lambda: int(os.environ.get("ANCHORSCAN_VIEWPORT_WIDTH", "1920"))
    )
    viewport_height: int = field(
        default_factory=lambda: int(os.environ.get("ANCHORSCAN_VIEWPORT_HEIGHT", "1080"))
    )

    # ------------------------------------------------------------------
    # Console
    # ------------------------------------------------------------------
    pause_on_exit: bool = field(
        default_factory=lambda: _env_flag("ANCHORSCAN_PAUSE", "1")
    )

    @property
    def viewport(self) -> tuple[int, int]:
        """``(width, height)`` of the virtual browser window."""
        return (self.viewport_width, self.viewport_height)


# Module-level singleton; import this everywhere:
#   from anchorscan.config import settings
settings = Settings()
