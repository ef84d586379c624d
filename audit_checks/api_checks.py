#!/usr/bin/env python3
"""
Checks that call the audit service directly and log what came back.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from audit_checks.client import AuditServiceClient
from audit_checks.config import (
    RECOMMENDATION_PREVIEW,
    TECHNICAL_KEYWORDS,
    USER_CENTRIC_KEYWORDS,
)
from audit_checks.errors import AuditCheckError, ClientError
from audit_checks.models import AuditResponse, LanguageStyle, ShareReportRequest

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of one API check"""

    name: str
    ok: bool
    data: Any = None
    error: Optional[AuditCheckError] = None


def detect_language_style(payload: Any) -> LanguageStyle:
    """Presence check for user-centric vs technical wording in a payload.

    Serializes the payload to compact JSON and looks for any keyword of
    each set. There is no weighting; both flags can be true at once.
    A parsed ``AuditResponse`` is dumped with every key the server sent,
    null-valued ones included.
    """
    if isinstance(payload, AuditResponse):
        payload = payload.model_dump(by_alias=True, exclude_unset=True)
    content = payload if isinstance(payload, str) else json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return LanguageStyle(
        user_centric=any(keyword in content for keyword in USER_CENTRIC_KEYWORDS),
        technical=any(keyword in content for keyword in TECHNICAL_KEYWORDS),
    )


def log_audit_summary(response: AuditResponse) -> None:
    logger.info("Analysis completed successfully!")
    logger.info("Key Results:")

    if response.key_insights is not None:
        logger.info("Key Insights:")
        for index, insight in enumerate(response.key_insights, start=1):
            logger.info("%d. %s", index, insight)

    if response.recommendations is not None:
        logger.info("Recommendations:")
        for index, recommendation in enumerate(response.recommendations[:RECOMMENDATION_PREVIEW], start=1):
            logger.info("%d. %s", index, recommendation)

    if response.issues is not None:
        first = response.first_issue
        logger.info("Issues Found: %d", len(response.issues))
        logger.info("First issue: %s", first.title if first else None)
        logger.info("Description: %s", first.description if first else None)


def log_failure(error: AuditCheckError) -> None:
    logger.error(error.describe())


def check_audit_api(client: AuditServiceClient, url: str, audit_type: str = "url") -> CheckResult:
    """Run one audit against the service and report on it. Never raises."""
    logger.info("Testing enhanced audit system against %s ...", url)
    try:
        response = client.run_audit(url, audit_type=audit_type)
    except AuditCheckError as error:
        log_failure(error)
        return CheckResult(name="audit-api", ok=False, error=error)
    except Exception as exc:
        error = ClientError(str(exc))
        log_failure(error)
        return CheckResult(name="audit-api", ok=False, error=error)

    log_audit_summary(response)

    style = detect_language_style(response)
    logger.info("Language Analysis:")
    logger.info("User-centric language detected: %s", style.user_centric)
    logger.info("Technical language present: %s", style.technical)

    return CheckResult(name="audit-api", ok=True, data={"response": response, "language": style})


def check_share_report(client: AuditServiceClient, request: ShareReportRequest) -> CheckResult:
    """Send a report by email through the service. Never raises."""
    logger.info("Testing email flow for %s ...", request.recipient_email)
    try:
        body = client.share_report(request)
    except AuditCheckError as error:
        log_failure(error)
        return CheckResult(name="share-report", ok=False, error=error)
    except Exception as exc:
        error = ClientError(str(exc))
        log_failure(error)
        return CheckResult(name="share-report", ok=False, error=error)

    logger.info("Success: %s", body)
    return CheckResult(name="share-report", ok=True, data=body)
