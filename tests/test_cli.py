"""Tests for the verification CLI."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from audit_checks.api_checks import CheckResult
from audit_checks.cli import build_parser, main, resolve_settings
from audit_checks.scenarios import Outcome, ScenarioResult


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("UX_AUDIT_APP_URL", "UX_AUDIT_API_URL", "UX_AUDIT_SCREENSHOT_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_settings_from_flags():
    args = build_parser().parse_args(
        ["ui", "image-tab", "--app-url", "http://localhost:5173/", "--screenshot-dir", "shots", "--log-level", "debug"]
    )

    settings = resolve_settings(args)

    assert settings.app_url == "http://localhost:5173"
    assert settings.api_url == "http://localhost:3001"
    assert settings.screenshot_dir == Path("shots")
    assert settings.log_level == "DEBUG"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("UX_AUDIT_API_URL", "https://api.staging.example/")

    settings = resolve_settings(build_parser().parse_args(["audit-api"]))

    assert settings.api_url == "https://api.staging.example"


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["ui", "case-study-demo"], None),
        (["ui", "case-study-demo", "--headed"], False),
        (["ui", "case-study-demo", "--headless"], True),
    ],
)
def test_headless_flags(argv, expected):
    assert build_parser().parse_args(argv).headless is expected


def test_unknown_scenario_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["ui", "does-not-exist"])


@pytest.mark.parametrize("ok,code", [(True, 0), (False, 1)])
def test_audit_api_exit_code(ok, code):
    with patch("audit_checks.cli.check_audit_api", return_value=CheckResult(name="audit-api", ok=ok)) as check:
        assert main(["audit-api", "--url", "https://stripe.com"]) == code

    client, url = check.call_args.args
    assert url == "https://stripe.com"
    assert client.base_url == "http://localhost:3001"


def test_email_flow_uses_recipient_flags():
    with patch("audit_checks.cli.check_share_report", return_value=CheckResult(name="share-report", ok=True)) as check:
        assert main(["email-flow", "--recipient-email", "qa@example.com", "--platform-name", "Stripe"]) == 0

    request = check.call_args.args[1]
    assert request.recipient_email == "qa@example.com"
    assert request.platform_name == "Stripe"


@pytest.mark.parametrize("outcome,code", [(Outcome.SUCCESS, 0), (Outcome.TIMEOUT, 0), (Outcome.ERROR, 1)])
def test_ui_exit_code(outcome, code):
    result = ScenarioResult(name="updated-layout", outcome=outcome)
    with patch("audit_checks.cli.execute", AsyncMock(return_value=result)) as execute:
        assert main(["ui", "updated-layout", "--headed"]) == code

    scenario, _settings = execute.call_args.args
    assert scenario.name == "updated-layout"
    assert execute.call_args.kwargs == {"headless": False}


def test_journey_transform_command():
    assert main(["journey-transform"]) == 0
