#!/usr/bin/env python3
"""
Command-line entry point for the UX Audit verification checks.

    python -m audit_checks.cli audit-api --url https://example.com
    python -m audit_checks.cli email-flow --recipient-email someone@example.com
    python -m audit_checks.cli ui updated-layout --headed
    python -m audit_checks.cli journey-transform
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from audit_checks.api_checks import check_audit_api, check_share_report
from audit_checks.client import AuditServiceClient
from audit_checks.config import LOG_DATE_FORMAT, LOG_FORMAT, CheckSettings
from audit_checks.journey import check_journey_transform
from audit_checks.models import sample_share_request
from audit_checks.scenarios import SCENARIOS, execute

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--app-url", type=str, help="Frontend URL (default: $UX_AUDIT_APP_URL or http://localhost:3000)")
    common.add_argument("--api-url", type=str, help="API URL (default: $UX_AUDIT_API_URL or http://localhost:3001)")
    common.add_argument("--screenshot-dir", type=str, help="Where screenshots are written (default: current directory)")
    common.add_argument("--log-level", type=str, help="Logging level (default: $LOG_LEVEL or INFO)")

    parser = argparse.ArgumentParser(description="UX Audit verification checks")

    subparsers = parser.add_subparsers(dest="command", required=True)

    audit = subparsers.add_parser("audit-api", parents=[common], help="POST an audit request and summarize the response")
    audit.add_argument("--url", type=str, default="https://example.com", help="Site to audit")
    audit.add_argument("--type", dest="audit_type", choices=["url", "image"], default="url", help="Audit type")

    email = subparsers.add_parser("email-flow", parents=[common], help="Share the sample report by email")
    email.add_argument("--recipient-email", type=str, default="test.user@example.com", help="Recipient address")
    email.add_argument("--recipient-name", type=str, default="Test User", help="Recipient name")
    email.add_argument("--platform-name", type=str, default="Sample Website", help="Audited platform name")

    ui = subparsers.add_parser("ui", parents=[common], help="Drive the frontend in a browser and save screenshots")
    ui.add_argument("scenario", choices=sorted(SCENARIOS), help="Scenario to run")
    mode = ui.add_mutually_exclusive_group()
    mode.add_argument("--headed", dest="headless", action="store_false", default=None, help="Show the browser window")
    mode.add_argument("--headless", dest="headless", action="store_true", help="Hide the browser window")

    subparsers.add_parser("journey-transform", parents=[common], help="Check the persona journey transformation")

    return parser


def resolve_settings(args: argparse.Namespace) -> CheckSettings:
    settings = CheckSettings.from_env()
    overrides = {}
    if args.app_url:
        overrides["app_url"] = args.app_url.rstrip("/")
    if args.api_url:
        overrides["api_url"] = args.api_url.rstrip("/")
    if args.screenshot_dir:
        overrides["screenshot_dir"] = Path(args.screenshot_dir)
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return replace(settings, **overrides)


def run(args: argparse.Namespace, settings: CheckSettings) -> bool:
    if args.command == "audit-api":
        with AuditServiceClient(settings.api_url) as client:
            return check_audit_api(client, args.url, audit_type=args.audit_type).ok

    if args.command == "email-flow":
        request = sample_share_request(
            recipient_email=args.recipient_email,
            recipient_name=args.recipient_name,
            platform_name=args.platform_name,
        )
        with AuditServiceClient(settings.api_url) as client:
            return check_share_report(client, request).ok

    if args.command == "ui":
        result = asyncio.run(execute(SCENARIOS[args.scenario], settings, headless=args.headless))
        return result.ok

    if args.command == "journey-transform":
        return check_journey_transform()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``argv``, run one check, return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        ok = run(args, settings)
    except KeyboardInterrupt:
        logger.info("Check interrupted by user")
        return 130

    logger.info("Check completed: %s", "PASS" if ok else "FAIL")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
