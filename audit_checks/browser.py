"""Browser session lifecycle and waiting helpers for the UI checks.

Everything a scenario touches in Playwright is acquired through
``browser_session`` so that the browser is closed on every exit path,
including the timeout fallback and error screenshot branches.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from audit_checks.errors import WaitTimeout

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT = {"width": 1440, "height": 900}


@asynccontextmanager
async def browser_session(
    headless: bool = True,
    viewport: Optional[Dict[str, int]] = None,
) -> AsyncIterator[Page]:
    """Launch Chromium and yield a fresh page.

    Example:
        async with browser_session() as page:
            await page.goto("http://localhost:3000")
        # browser closed, Playwright stopped
    """
    playwright = await async_playwright().start()
    browser = None
    try:
        browser = await playwright.chromium.launch(headless=headless)
        logger.debug("Launched chromium (headless=%s)", headless)
        page = await browser.new_page(viewport=viewport or DEFAULT_VIEWPORT)
        yield page
    finally:
        if browser is not None:
            try:
                await browser.close()
                logger.debug("Closed browser")
            except Exception as e:
                logger.error(f"Error closing browser: {e}")
        await playwright.stop()


async def wait_for_visible(page: Page, selector: str, timeout: float) -> None:
    """Wait until the first match of ``selector`` is visible; ``WaitTimeout`` otherwise."""
    try:
        await page.locator(selector).first.wait_for(state="visible", timeout=timeout * 1000)
    except PlaywrightTimeoutError as e:
        raise WaitTimeout(f"{selector} not visible within {timeout:g}s") from e
