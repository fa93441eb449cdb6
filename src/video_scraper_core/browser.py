from playwright.async_api import async_playwright

from .capture import PageCaptureStream
from .logger import logger


class BrowserManager:
    """Handle on a running browser process and the Playwright driver behind it."""

    def __init__(self, playwright, browser):
        self.playwright = playwright
        self.browser = browser

    async def new_page(self):
        # the window size comes from the launch args, not from an emulated viewport
        return await self.browser.new_page(no_viewport=True)

    async def close(self):
        """Close browser and playwright"""
        logger.info("👋 Closing browser...")
        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()
        logger.info("✅ Browser closed successfully.")


class PlaywrightEngine:
    """Automation engine backed by Playwright's Chromium."""

    browser_type = "chromium"

    async def launch(self, executable_path, window_size, args=(), headless=False):
        logger.info("🚀 Launching browser...")
        playwright = await async_playwright().start()
        try:
            browser = await getattr(playwright, self.browser_type).launch(
                executable_path=executable_path or None,
                headless=headless,
                args=[f"--window-size={window_size.width},{window_size.height}", *args],
            )
        except Exception:
            await playwright.stop()
            raise
        logger.info("✅ Browser launched successfully.")
        return BrowserManager(playwright, browser)

    async def get_stream(self, page, capture_options):
        stream = PageCaptureStream(page, capture_options)
        return await stream.start()
