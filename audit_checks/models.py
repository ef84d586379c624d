#!/usr/bin/env python3
"""
Request/response shapes exchanged with the external UX Audit service.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python, unknown keys kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class AuditRequest(WireModel):
    type: Literal["url", "image"] = "url"
    url: str


class AuditIssue(WireModel):
    title: Optional[str] = None
    description: Optional[str] = None
    severity: Optional[str] = None
    recommendation: Optional[str] = None


class AuditResponse(WireModel):
    key_insights: Optional[List[str]] = Field(default=None, alias="keyInsights")
    recommendations: Optional[List[str]] = None
    issues: Optional[List[AuditIssue]] = None

    @property
    def first_issue(self) -> Optional[AuditIssue]:
        return self.issues[0] if self.issues else None


class ShareReportRequest(WireModel):
    audit_data: Dict[str, Any] = Field(alias="auditData")
    recipient_email: str = Field(alias="recipientEmail")
    recipient_name: str = Field(alias="recipientName")
    platform_name: str = Field(alias="platformName")


class LanguageStyle(BaseModel):
    user_centric: bool = False
    technical: bool = False


class JourneyStep(WireModel):
    action: str
    issues: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)


class PersonaJourney(WireModel):
    persona: str = ""
    persona_reasoning: str = Field(default="", alias="personaReasoning")
    steps: List[JourneyStep] = Field(default_factory=list)
    overall_experience: str = Field(default="fair", alias="overallExperience")


# Sample report used by the share-report check
SAMPLE_AUDIT_DATA: Dict[str, Any] = {
    "scores": {
        "overall": {"score": 85, "maxScore": 100, "grade": "B+"},
        "heuristics": {"score": 88, "maxScore": 100},
        "accessibility": {"score": 82, "maxScore": 100},
    },
    "keyInsights": [
        "Strong visual hierarchy with clear navigation structure",
        "Good mobile responsiveness across different screen sizes",
        "Some accessibility improvements needed for screen readers",
    ],
    "recommendations": [
        "Improve color contrast ratios for better accessibility compliance",
        "Add alt text to all decorative images and icons",
        "Optimize loading speed for better user experience",
    ],
    "issues": [
        {
            "title": "Color Contrast Issue",
            "description": "Some text elements don't meet WCAG contrast requirements",
            "severity": "medium",
            "recommendation": "Increase contrast ratio to at least 4.5:1",
        }
    ],
}


def sample_share_request(
    recipient_email: str = "test.user@example.com",
    recipient_name: str = "Test User",
    platform_name: str = "Sample Website",
) -> ShareReportRequest:
    return ShareReportRequest(
        audit_data=SAMPLE_AUDIT_DATA,
        recipient_email=recipient_email,
        recipient_name=recipient_name,
        platform_name=platform_name,
    )
