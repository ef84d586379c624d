#!/usr/bin/env python3
"""
Error taxonomy for the audit verification scripts.
"""

from typing import Any, Optional

import requests


class AuditCheckError(Exception):
    """Base class for every failure a verification run can report"""

    label = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        return f"{self.label}: {self.message}"


class ServerError(AuditCheckError):
    """The audit service answered with a non-2xx status"""

    label = "API Error"

    def __init__(self, status_code: int, body: Any):
        super().__init__(f"{status_code} {body}")
        self.status_code = status_code
        self.body = body

    def describe(self) -> str:
        return f"{self.label}: {self.status_code} {self.body}"


class NetworkError(AuditCheckError):
    """The request went out but no response came back (refused, reset, timed out)"""

    label = "Network Error"


class ClientError(AuditCheckError):
    """Anything else, typically a request that could not be built"""

    label = "Error"


class ResponseShapeError(AuditCheckError):
    """The response body did not match the expected schema"""

    label = "Response Shape Error"

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body


class UIInteractionFailure(AuditCheckError):
    """A browser step failed: navigation, a missing selector, a click"""

    label = "UI Interaction Failure"

    def __init__(self, message: str, state: Optional[str] = None):
        super().__init__(message)
        self.state = state


class WaitTimeout(AuditCheckError):
    """A polled condition did not become true before its deadline"""

    label = "Timeout"


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def classify_request_error(exc: Exception) -> AuditCheckError:
    """Map a requests exception onto ServerError / NetworkError / ClientError."""
    if isinstance(exc, AuditCheckError):
        return exc

    response = getattr(exc, "response", None)
    if response is not None:
        return ServerError(response.status_code, _response_body(response))

    if isinstance(exc, (requests.exceptions.ConnectionError, requests.exceptions.Timeout)):
        return NetworkError(str(exc))

    return ClientError(str(exc))
