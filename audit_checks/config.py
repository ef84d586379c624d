#!/usr/bin/env python3
"""
Configuration for the UX Audit verification scripts.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Targets
DEFAULT_APP_URL = "http://localhost:3000"
DEFAULT_API_URL = "http://localhost:3001"
AUDIT_PATH = "/api/audit"
SHARE_REPORT_PATH = "/api/share-report"

# Timeouts (seconds)
AUDIT_TIMEOUT = 60
SHARE_REPORT_TIMEOUT = 30

# Language heuristic keywords (substring presence only)
USER_CENTRIC_KEYWORDS = ("users", "visitor", "customer")
TECHNICAL_KEYWORDS = ("DOM", "MAIN_CONTENT", "element")

# Number of recommendations printed by the audit check
RECOMMENDATION_PREVIEW = 3

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class CheckSettings:
    """Where the verification scripts point and where screenshots land."""

    app_url: str = DEFAULT_APP_URL
    api_url: str = DEFAULT_API_URL
    screenshot_dir: Path = Path(".")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CheckSettings":
        env = os.environ if environ is None else environ
        return cls(
            app_url=(env.get("UX_AUDIT_APP_URL") or DEFAULT_APP_URL).rstrip("/"),
            api_url=(env.get("UX_AUDIT_API_URL") or DEFAULT_API_URL).rstrip("/"),
            screenshot_dir=Path(env.get("UX_AUDIT_SCREENSHOT_DIR") or "."),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
