"""Shared fixtures for the status endpoint and verification check tests."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from audit_checks.config import CheckSettings  # noqa: E402
from status_server.config import StatusConfig  # noqa: E402
from status_server.server import create_app  # noqa: E402

SECRET = "sk-or-v1-test-secret-value"


@pytest.fixture
def configured_app():
    """Status app with the key present."""
    app = create_app(StatusConfig(has_key=True, environment="production", region="iad1"))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def bare_app():
    """Status app with nothing configured."""
    app = create_app(StatusConfig())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def settings(tmp_path):
    return CheckSettings(app_url="http://localhost:3000", api_url="http://localhost:3001", screenshot_dir=tmp_path)
