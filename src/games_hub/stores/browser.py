"""
Isolated Playwright browser sessions for store lookups
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Page, async_playwright
from playwright_stealth import Stealth

from games_hub.config import Settings, get_context_options, get_launch_options

# Hide automation
HIDE_WEBDRIVER_SCRIPT = """
    Object.defineProperty(navigator, 'webdriver', {
        get: () => false
    });
"""


@asynccontextmanager
async def browser_session(settings: Settings) -> AsyncIterator[Page]:
    """
    Launch a fresh Chromium instance and yield a stealth page.

    Each call owns its own browser; it is closed when the block exits,
    whether or not the block raised.
    """
    async with Stealth().use_async(async_playwright()) as p:
        browser = await p.chromium.launch(**get_launch_options(settings))
        try:
            context = await browser.new_context(**get_context_options())
            page = await context.new_page()
            await page.add_init_script(HIDE_WEBDRIVER_SCRIPT)
            yield page
        finally:
            await browser.close()
