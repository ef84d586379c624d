#!/usr/bin/env python3
"""
HTTP client for the external UX Audit service.
"""

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from audit_checks.config import (
    AUDIT_PATH,
    AUDIT_TIMEOUT,
    DEFAULT_API_URL,
    SHARE_REPORT_PATH,
    SHARE_REPORT_TIMEOUT,
)
from audit_checks.errors import ResponseShapeError, classify_request_error
from audit_checks.models import AuditRequest, AuditResponse, ShareReportRequest

logger = logging.getLogger(__name__)


class AuditServiceClient:
    """Thin wrapper over the audit and share-report endpoints.

    Every failure leaves this class as an ``AuditCheckError`` subclass:
    ``ServerError`` for non-2xx answers, ``NetworkError`` when nothing came
    back, ``ClientError`` for anything else and ``ResponseShapeError`` when
    the body is not what the service promised. Nothing is retried.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.setdefault("Content-Type", "application/json")

    def _post(self, path: str, payload: Dict[str, Any], timeout: float) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("POST %s (timeout=%ss)", url, timeout)
        try:
            response = self.session.post(url, json=payload, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise classify_request_error(exc) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseShapeError(f"Response from {path} is not JSON", body=response.text) from exc

    def run_audit(self, url: str, audit_type: str = "url", timeout: float = AUDIT_TIMEOUT) -> AuditResponse:
        try:
            request = AuditRequest(type=audit_type, url=url)
        except ValidationError as exc:
            raise classify_request_error(ValueError(f"Invalid audit request: {exc}")) from exc

        body = self._post(AUDIT_PATH, request.to_wire(), timeout)
        try:
            return AuditResponse.model_validate(body)
        except ValidationError as exc:
            raise ResponseShapeError(f"Unexpected audit response shape: {exc.error_count()} error(s)", body=body) from exc

    def share_report(self, request: ShareReportRequest, timeout: float = SHARE_REPORT_TIMEOUT) -> Any:
        return self._post(SHARE_REPORT_PATH, request.to_wire(), timeout)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AuditServiceClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
