from abc import ABC, abstractmethod

from .utils import parse_duration_text


class SiteAdapter(ABC):
    """
    Site-specific part of a video scrape.

    A concrete adapter supplies the three selectors and the after-page-loaded
    hook. The step helpers below work for most players and can be overridden
    when a page needs something else.
    """

    @abstractmethod
    async def after_page_loaded(self, options, page, logger):
        """
        Called once the page at the scraped url is loaded, before the video is
        looked up. Useful for logging in or dismissing overlays; it may also
        change ``options`` (e.g. set ``options.duration``).
        """

    @abstractmethod
    def get_video_duration_selector(self):
        """Selector of the element whose text is the video duration."""

    @abstractmethod
    def get_full_screen_selector(self):
        """Selector of the control that puts the video in full screen."""

    @abstractmethod
    def get_play_button_selector(self):
        """Selector of the control that starts playback."""

    def handle_duration_text(self, duration_text):
        """Return the duration in milliseconds for the text read from the page."""
        return parse_duration_text(duration_text)

    async def get_video_duration(self, page, selector, logger):
        logger.debug('Waiting for selector of video duration')
        await page.wait_for_selector(selector)

        logger.debug('Getting the total time of the video')
        duration_text = await page.eval_on_selector(selector, "el => el.innerHTML")

        return self.handle_duration_text(duration_text)

    async def set_video_to_full_screen(self, page, selector, logger):
        logger.debug('Waiting for selector of fullscreen button')
        await page.wait_for_selector(selector)

        logger.debug('Clicking the fullscreen button')
        await page.eval_on_selector(selector, "el => el.click()")

    async def play_video(self, page, selector, logger):
        logger.debug('Waiting for selector of play button')
        await page.wait_for_selector(selector)

        logger.debug('Clicking play on the video')
        await page.click(selector)


class SelectorSiteAdapter(SiteAdapter):
    """Adapter described entirely by selectors, e.g. the ``selectors`` config section."""

    def __init__(self, video_duration, full_screen, play_button, after_load_clicks=()):
        self.video_duration = video_duration
        self.full_screen = full_screen
        self.play_button = play_button
        self.after_load_clicks = list(after_load_clicks or [])

    @classmethod
    def from_config(cls, selectors):
        missing = [key for key in ("video_duration", "full_screen", "play_button") if not selectors.get(key)]
        if missing:
            raise ValueError(f"Missing selectors: {', '.join(missing)}")
        return cls(
            selectors["video_duration"],
            selectors["full_screen"],
            selectors["play_button"],
            selectors.get("after_load_clicks") or [],
        )

    async def after_page_loaded(self, options, page, logger):
        for selector in self.after_load_clicks:
            logger.debug('Clicking after-load selector', selector)
            await page.wait_for_selector(selector)
            await page.click(selector)

    def get_video_duration_selector(self):
        return self.video_duration

    def get_full_screen_selector(self):
        return self.full_screen

    def get_play_button_selector(self):
        return self.play_button
