import asyncio
from enum import Enum

from tqdm import tqdm

from .browser import PlaywrightEngine
from .config import handle_browser_options, handle_scraping_options
from .exceptions import (
    VideoScraperCoreBrowserNotLaunchedError,
    VideoScraperCoreDuringBrowserCloseError,
    VideoScraperCoreDuringBrowserLaunchError,
    VideoScraperCoreDuringScrapingError,
    VideoScraperCoreError,
)
from .logger import ScraperLogger
from .utils import format_duration


class BrowserState(Enum):
    UNLAUNCHED = "unlaunched"
    LAUNCHED = "launched"
    CLOSED = "closed"


class VideoScraperCore:
    """
    Scrapes a video played in a browser page and saves it to a file.

    The site-specific parts (selectors, login or overlay handling) come from
    the given ``SiteAdapter``; this class owns the browser lifecycle and the
    navigate, play, record sequence.

    Usage::

        scraper = VideoScraperCore(MySiteAdapter(), {"debug": True})
        await scraper.launch()
        try:
            await scraper.scrape(url, "video.webm", {"full_screen": False})
        finally:
            await scraper.close()
    """

    def __init__(self, adapter, options=None, engine=None):
        self.adapter = adapter
        self.engine = engine or PlaywrightEngine()
        self.state = BrowserState.UNLAUNCHED
        self.browser = None
        self._scrape_lock = asyncio.Lock()
        self.set_browser_options(options or {})

        self.video_duration_selector = adapter.get_video_duration_selector()
        self.full_screen_selector = adapter.get_full_screen_selector()
        self.play_button_selector = adapter.get_play_button_selector()

    async def __aenter__(self):
        await self.launch()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def set_browser_options(self, options):
        """Replace the browser options; a running browser is not affected."""
        self.options = handle_browser_options(options)
        self.logger = ScraperLogger(debug=self.options.debug, scope=self.options.debug_scope)

        self.logger.debug('BrowserOptions are', self.options)

    async def launch(self):
        """Launch the browser window."""
        if self.state is not BrowserState.UNLAUNCHED:
            raise VideoScraperCoreError(f"Cannot launch a browser that is {self.state.value}")

        try:
            self.logger.debug('Launching browser')
            self.browser = await self.engine.launch(
                self.options.executable_path,
                self.options.window_size,
                self.options.launch_args,
                headless=self.options.headless,
            )
            self.logger.debug('Browser launched')
        except Exception as error:
            raise VideoScraperCoreDuringBrowserLaunchError(error) from error

        self.state = BrowserState.LAUNCHED

    async def close(self):
        """Close the browser window. Does nothing if no browser is running."""
        if self.state is not BrowserState.LAUNCHED:
            return

        try:
            self.logger.debug('Closing browser')
            await self.browser.close()
        except Exception as error:
            raise VideoScraperCoreDuringBrowserCloseError(error) from error

        self.browser = None
        self.state = BrowserState.CLOSED

    async def scrape(self, url, dest_path, options=None):
        """
        Scrape the video at ``url`` and save it to ``dest_path``.

        The container follows ``mime_type`` (webm by default). Any failure after
        the launch check is raised as VideoScraperCoreDuringScrapingError with
        the original error as its cause.
        """
        scraping_options = handle_scraping_options(options)

        if self.state is not BrowserState.LAUNCHED:
            raise VideoScraperCoreBrowserNotLaunchedError()

        async with self._scrape_lock:
            # the browser may have been closed while this call was queued
            if self.state is not BrowserState.LAUNCHED:
                raise VideoScraperCoreBrowserNotLaunchedError()
            try:
                await self._scrape(url, dest_path, scraping_options)
            except Exception as error:
                raise VideoScraperCoreDuringScrapingError(
                    error, other_info={"url": url, "dest_path": str(dest_path)}
                ) from error

    def _scrape_logger(self, options):
        if options.use_global_debug:
            return self.logger
        debug = self.options.debug if options.debug is None else options.debug
        return ScraperLogger(debug=debug, scope=options.debug_scope)

    async def _scrape(self, url, dest_path, options):
        logger = self._scrape_logger(options)

        logger.debug('Launching page and going to the url', url)
        page = await self.browser.new_page()
        try:
            if options.timeout is not None:
                page.set_default_timeout(options.timeout)
            await page.goto(url, wait_until="networkidle")

            logger.debug('Executing the after_page_loaded hook')
            await self.adapter.after_page_loaded(options, page, logger)

            if options.duration is None:
                options.duration = await self.adapter.get_video_duration(
                    page, self.video_duration_selector, logger
                )

            if options.full_screen:
                await self.adapter.set_video_to_full_screen(page, self.full_screen_selector, logger)
            await self.adapter.play_video(page, self.play_button_selector, logger)

            logger.debug(f'Waiting for {options.delay_after_video_started}ms before starting recording')
            await page.wait_for_timeout(options.delay_after_video_started)

            await self._record(page, dest_path, options, logger)
        finally:
            logger.debug('Closing page')
            await page.close()

    async def _record(self, page, dest_path, options, logger):
        logger.debug('Starting recording')
        with open(dest_path, "wb") as file:
            stream = await self.engine.get_stream(page, options.capture_options())
            stream.pipe(file)
            try:
                logger.debug('Waiting for video to end. Duration is', format_duration(options.duration))
                await self._wait_for_video(page, options)

                logger.debug(f'Waiting for {options.delay_after_video_finished}ms before stopping recording')
                await page.wait_for_timeout(options.delay_after_video_finished)
            finally:
                logger.debug('Stopping recording')
                await stream.destroy()

    async def _wait_for_video(self, page, options):
        if not options.show_progress:
            await page.wait_for_timeout(options.duration)
            return

        remaining = options.duration
        with tqdm(
            total=round(options.duration / 1000),
            desc="⏺️ Recording",
            unit="s",
            bar_format="{l_bar}{bar} | {n:.0f}/{total}s",
            dynamic_ncols=True,
        ) as pbar:
            while remaining > 0:
                step = min(1000, remaining)
                await page.wait_for_timeout(step)
                remaining -= step
                pbar.update(step / 1000)
