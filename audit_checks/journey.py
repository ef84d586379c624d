#!/usr/bin/env python3
"""
Persona journey transformation check.

The audit model returns a persona-driven journey whose steps carry
friction points and trust barriers separately; the report's "Current User
Experience" section expects one ``issues`` list per step.
"""

import logging
from typing import Any, Dict, List, Optional

from audit_checks.models import JourneyStep, PersonaJourney

logger = logging.getLogger(__name__)

MAX_EXPERIENCE_POINTS = 3

SAMPLE_PERSONA_JOURNEY: Dict[str, Any] = {
    "persona": "Fintech startup founder seeking reliable UI/UX partners for app redesign",
    "personaReasoning": "Based on the site content showing design services and portfolio",
    "steps": [
        {
            "step": 1,
            "stage": "awareness",
            "userGoal": "Understand what design services are offered",
            "emotionalState": "curious",
            "currentExperience": "Landing on homepage and scanning for relevant information",
            "frictionPoints": [
                "Portfolio not immediately visible on homepage",
                "Services description lacks specific details",
            ],
            "trustBarriers": [
                "No client testimonials in hero section",
                "Missing case studies on first screen",
            ],
            "improvements": [
                "Add portfolio preview to homepage hero section",
                "Include client logos above the fold",
            ],
        },
        {
            "step": 2,
            "stage": "exploration",
            "userGoal": "Review past work and case studies",
            "emotionalState": "cautious",
            "currentExperience": "Navigating to portfolio section",
            "frictionPoints": [
                "Portfolio items lack context and results",
                "Navigation to case studies not obvious",
            ],
            "trustBarriers": [
                "No metrics or outcomes shown in portfolio",
                "Client names are missing",
            ],
            "improvements": [
                "Add results metrics to each portfolio item",
                "Show client names and testimonials",
            ],
        },
        {
            "step": 3,
            "stage": "trust",
            "userGoal": "Verify expertise and credibility",
            "emotionalState": "hesitant",
            "currentExperience": "Looking for proof of expertise",
            "frictionPoints": [
                "Team credentials not prominently displayed",
                "Pricing information hidden or unclear",
            ],
            "trustBarriers": [
                "No awards or recognition mentioned",
                "Missing industry certifications",
            ],
            "improvements": [
                "Add team credentials section with years of experience",
                "Include transparent pricing or pricing ranges",
            ],
        },
    ],
    "overallExperience": "fair",
    "keyTakeaway": "Users face significant trust barriers when evaluating the agency's expertise",
}


def transform_persona_journey(journey: Optional[Dict[str, Any]]) -> Any:
    """Flatten a persona journey into the shape the report renders.

    Returns ``None`` for a missing journey and the input untouched when it
    has no ``steps`` list.
    """
    if journey is None:
        return None

    steps = journey.get("steps")
    if not isinstance(steps, list):
        return journey

    transformed: List[JourneyStep] = []
    for step in steps:
        issues = list(step.get("frictionPoints") or []) + list(step.get("trustBarriers") or [])
        transformed.append(
            JourneyStep(
                action=step.get("userGoal") or step.get("currentExperience") or "User interaction",
                issues=issues,
                improvements=list(step.get("improvements") or []),
            )
        )

    return PersonaJourney(
        persona=journey.get("persona") or "",
        persona_reasoning=journey.get("personaReasoning") or "",
        steps=transformed,
        overall_experience=journey.get("overallExperience") or "fair",
    )


def current_experience_points(journey: Optional[PersonaJourney]) -> List[str]:
    """First issue of each step that has any, capped at three."""
    if journey is None or not journey.steps:
        return []
    points = [step.issues[0] for step in journey.steps if step.issues]
    return points[:MAX_EXPERIENCE_POINTS]


def check_journey_transform(journey: Optional[Dict[str, Any]] = None) -> bool:
    """Run the transform on ``journey`` (or the built-in sample) and report.

    True when the "Current User Experience" section would render.
    """
    transformed = transform_persona_journey(SAMPLE_PERSONA_JOURNEY if journey is None else journey)
    if not isinstance(transformed, PersonaJourney):
        logger.error("Journey was not transformed (no steps list)")
        return False

    logger.info("Persona: %s", transformed.persona)
    logger.info("Number of steps: %d", len(transformed.steps))
    logger.info("Overall experience: %s", transformed.overall_experience)

    for index, step in enumerate(transformed.steps, start=1):
        logger.info("Step %d: %s", index, step.action)
        logger.info("  Issues (%d): %s", len(step.issues), "; ".join(step.issues))
        logger.info("  Improvements (%d): %s", len(step.improvements), "; ".join(step.improvements))

    points = current_experience_points(transformed)
    for index, point in enumerate(points, start=1):
        logger.info("Current experience %d: %s", index, point)

    renders = bool(transformed.steps) and bool(points)
    if renders:
        logger.info("SUCCESS! The \"Current User Experience\" section will display correctly.")
    else:
        logger.error("FAILED! The \"Current User Experience\" section would still be empty.")
    return renders
