#!/usr/bin/env python3
"""
Configuration for the UX Audit status endpoints.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

SERVICE_NAME = "UX Audit Platform API"
SERVICE_VERSION = "1.0.0"
RUNTIME_NAME = "vercel-python"

# Environment variable names
SECRET_KEY_VAR = "OPENROUTER_API_KEY"  # presence-checked only
ENVIRONMENT_VAR = "VERCEL_ENV"
REGION_VAR = "VERCEL_REGION"
DEPLOYMENT_URL_VAR = "VERCEL_URL"

DEFAULT_ENVIRONMENT = "development"
DEFAULT_REGION = "unknown"

# CORS
STATIC_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "https://uxaudit.vercel.app",
)
ALLOWED_METHODS = ("GET", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization")

# Error messages
ERROR_MESSAGES = {
    "method_not_allowed": "Method not allowed",
    "not_found": "Not found",
    "internal": "Internal server error",
}

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class StatusConfig:
    """Everything the status handlers report, resolved once.

    Only the presence of the secret is stored; its value never enters
    this object.
    """

    has_key: bool = False
    environment: str = DEFAULT_ENVIRONMENT
    region: str = DEFAULT_REGION
    deployment_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StatusConfig":
        env = os.environ if environ is None else environ
        return cls(
            has_key=bool(env.get(SECRET_KEY_VAR)),
            environment=env.get(ENVIRONMENT_VAR) or DEFAULT_ENVIRONMENT,
            region=env.get(REGION_VAR) or DEFAULT_REGION,
            deployment_url=env.get(DEPLOYMENT_URL_VAR) or None,
        )

    @property
    def key_status(self) -> str:
        return "configured" if self.has_key else "missing"

    @property
    def allowed_origins(self) -> Tuple[str, ...]:
        if self.deployment_url:
            return STATIC_ALLOWED_ORIGINS + (f"https://{self.deployment_url}",)
        return STATIC_ALLOWED_ORIGINS
