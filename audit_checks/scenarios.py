#!/usr/bin/env python3
"""
Browser scenarios that walk the UX Audit frontend and save screenshots.

Every scenario follows the same flow:

    START -> NAVIGATE_HOME -> SUBMIT_URL -> WAIT_FOR_ANALYSIS
          -> SCREENSHOT | FALLBACK_SCREENSHOT -> CLEANUP -> END

Any failure jumps straight to ERROR_SCREENSHOT -> CLEANUP -> END.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from audit_checks.browser import browser_session, wait_for_visible
from audit_checks.config import CheckSettings
from audit_checks.errors import AuditCheckError, UIInteractionFailure, WaitTimeout

logger = logging.getLogger(__name__)

HOME_READY_TIMEOUT = 10  # seconds


class FlowState(str, Enum):
    START = "start"
    NAVIGATE_HOME = "navigate_home"
    SUBMIT_URL = "submit_url"
    WAIT_FOR_ANALYSIS = "wait_for_analysis"
    SCREENSHOT = "screenshot"
    FALLBACK_SCREENSHOT = "fallback_screenshot"
    ERROR_SCREENSHOT = "error_screenshot"
    CLEANUP = "cleanup"
    END = "end"


class Outcome(str, Enum):
    SUCCESS = "success"
    FALLBACK = "fallback"  # main report captured, follow-up view unavailable
    TIMEOUT = "timeout"  # analysis did not finish, current state captured
    ERROR = "error"


@dataclass
class FollowUp:
    """Optional second view reached from the report (e.g. Deep Dive)"""

    trigger_selector: str
    screenshot: str
    fallback_screenshot: str
    ready_selector: Optional[str] = None
    trigger_timeout: float = 5
    ready_timeout: float = 15


@dataclass
class BrowserScenario:
    """One linear walk through the frontend"""

    name: str
    description: str
    action_selector: str
    screenshot: str
    error_screenshot: str
    input_selector: Optional[str] = None
    input_value: Optional[str] = None
    loading_selector: Optional[str] = None
    loading_timeout: float = 10
    ready_selector: Optional[str] = None
    ready_timeout: float = 60
    timeout_screenshot: Optional[str] = None
    scroll_to: Optional[str] = None
    follow_up: Optional[FollowUp] = None
    full_page: bool = True
    headless: bool = True


@dataclass
class ScenarioResult:
    name: str
    outcome: Optional[Outcome] = None
    states: List[FlowState] = field(default_factory=list)
    screenshots: List[Path] = field(default_factory=list)
    error: Optional[AuditCheckError] = None

    @property
    def state(self) -> Optional[FlowState]:
        return self.states[-1] if self.states else None

    @property
    def ok(self) -> bool:
        return self.outcome is not None and self.outcome != Outcome.ERROR

    def enter(self, state: FlowState) -> None:
        logger.debug("[%s] -> %s", self.name, state.value)
        self.states.append(state)


async def _capture(page: Page, result: ScenarioResult, output_dir: Path, filename: str, full_page: bool = True) -> Path:
    path = output_dir / filename
    await page.screenshot(path=str(path), full_page=full_page)
    result.screenshots.append(path)
    logger.info("Screenshot saved: %s", path)
    return path


async def _follow_up(page: Page, scenario: BrowserScenario, result: ScenarioResult, output_dir: Path) -> None:
    follow_up = scenario.follow_up
    try:
        await wait_for_visible(page, follow_up.trigger_selector, follow_up.trigger_timeout)
        await page.click(follow_up.trigger_selector)
        if follow_up.ready_selector:
            await wait_for_visible(page, follow_up.ready_selector, follow_up.ready_timeout)
    except (WaitTimeout, PlaywrightError) as exc:
        logger.warning("Follow-up view not available (%s), taking current page screenshot", exc)
        result.enter(FlowState.FALLBACK_SCREENSHOT)
        await _capture(page, result, output_dir, follow_up.fallback_screenshot, scenario.full_page)
        result.outcome = Outcome.FALLBACK
        return

    await _capture(page, result, output_dir, follow_up.screenshot, scenario.full_page)
    logger.info("Screenshots captured successfully!")


async def run_scenario(page: Page, scenario: BrowserScenario, app_url: str, output_dir: Path) -> ScenarioResult:
    """Drive ``page`` through ``scenario``.

    Never raises for failures inside the flow: they are logged, an error
    screenshot is attempted and the result carries ``Outcome.ERROR``.
    Closing the browser is the caller's job (see ``execute``).
    """
    result = ScenarioResult(name=scenario.name)
    result.enter(FlowState.START)

    try:
        result.enter(FlowState.NAVIGATE_HOME)
        logger.info("Navigating to %s ...", app_url)
        await page.goto(app_url)
        await wait_for_visible(page, scenario.input_selector or scenario.action_selector, HOME_READY_TIMEOUT)

        result.enter(FlowState.SUBMIT_URL)
        if scenario.input_selector:
            logger.info("Entering test URL %s ...", scenario.input_value)
            await page.fill(scenario.input_selector, scenario.input_value or "")
        logger.info("Clicking %s ...", scenario.action_selector)
        await page.click(scenario.action_selector)

        result.enter(FlowState.WAIT_FOR_ANALYSIS)
        if scenario.loading_selector:
            await wait_for_visible(page, scenario.loading_selector, scenario.loading_timeout)
            logger.info("Analysis in progress...")

        if scenario.ready_selector:
            try:
                await wait_for_visible(page, scenario.ready_selector, scenario.ready_timeout)
            except WaitTimeout:
                if scenario.timeout_screenshot is None:
                    raise
                logger.warning("Timeout waiting for completion, taking current screenshot...")
                result.enter(FlowState.FALLBACK_SCREENSHOT)
                await _capture(page, result, output_dir, scenario.timeout_screenshot, scenario.full_page)
                result.outcome = Outcome.TIMEOUT
                return result
            logger.info("Report generated successfully!")

        if scenario.scroll_to:
            await page.locator(scenario.scroll_to).first.scroll_into_view_if_needed()

        result.enter(FlowState.SCREENSHOT)
        await _capture(page, result, output_dir, scenario.screenshot, scenario.full_page)
        result.outcome = Outcome.SUCCESS

        if scenario.follow_up:
            await _follow_up(page, scenario, result, output_dir)

    except Exception as exc:
        failed_in = result.state
        logger.error(f"Error during {scenario.name} ({failed_in.value}): {exc}")
        result.error = exc if isinstance(exc, AuditCheckError) else UIInteractionFailure(str(exc), state=failed_in.value)
        result.outcome = Outcome.ERROR
        result.enter(FlowState.ERROR_SCREENSHOT)
        try:
            await _capture(page, result, output_dir, scenario.error_screenshot)
        except Exception as shot_exc:
            logger.error(f"Could not capture error screenshot: {shot_exc}")

    return result


async def execute(
    scenario: BrowserScenario,
    settings: CheckSettings,
    headless: Optional[bool] = None,
) -> ScenarioResult:
    """Run ``scenario`` in its own browser session and always close it."""
    output_dir = Path(settings.screenshot_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    headless = scenario.headless if headless is None else headless

    logger.info("Running %s: %s", scenario.name, scenario.description)
    try:
        async with browser_session(headless=headless) as page:
            result = await run_scenario(page, scenario, settings.app_url, output_dir)
    except Exception as exc:
        logger.error(f"Browser session failed for {scenario.name}: {exc}")
        result = ScenarioResult(name=scenario.name, outcome=Outcome.ERROR, error=UIInteractionFailure(str(exc)))

    result.enter(FlowState.CLEANUP)
    result.enter(FlowState.END)
    logger.info("%s finished: %s", scenario.name, result.outcome.value)
    return result


SCENARIOS: Dict[str, BrowserScenario] = {
    scenario.name: scenario
    for scenario in (
        BrowserScenario(
            name="image-tab",
            description="Switch the audit form to the Image tab",
            action_selector="text=Image",
            screenshot="image-tab-test.png",
            error_screenshot="image-tab-error.png",
            full_page=False,
        ),
        BrowserScenario(
            name="updated-layout",
            description="Audit stripe.com and capture the report and deep dive layouts",
            input_selector='input[placeholder*="https://example.com"]',
            input_value="https://stripe.com",
            action_selector='button:has-text("Start AI Audit")',
            ready_selector="text=Overall Insights",
            timeout_screenshot="audit-report-timeout.png",
            screenshot="audit-report-updated.png",
            error_screenshot="error-state.png",
            follow_up=FollowUp(
                trigger_selector='button:has-text("Deep Dive")',
                ready_selector="text=Deep Dive UX Audit",
                screenshot="deep-dive-updated.png",
                fallback_screenshot="current-report-updated.png",
            ),
        ),
        BrowserScenario(
            name="case-study-demo",
            description="Audit a FinTech site and capture the matched case studies",
            input_selector='input[type="url"]',
            input_value="https://stripe.com",
            action_selector="text=Start AI Audit",
            loading_selector="text=Analyzing",
            loading_timeout=10,
            ready_selector="text=Relevant Case Studies",
            ready_timeout=45,
            timeout_screenshot="case-study-demo-loading.png",
            scroll_to="text=Relevant Case Studies",
            screenshot="case-study-demo.png",
            error_screenshot="case-study-demo-error.png",
            headless=False,
        ),
        BrowserScenario(
            name="audit-report",
            description="Audit example.com and capture the finished report",
            input_selector='input[type="url"]',
            input_value="https://example.com",
            action_selector="text=Start AI Audit",
            ready_selector="text=Overall Insights",
            ready_timeout=60,
            screenshot="test-report-with-screenshot.png",
            error_screenshot="test-report-error.png",
            headless=False,
        ),
    )
}
