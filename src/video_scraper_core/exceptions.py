class VideoScraperCoreError(Exception):
    """Base class for all exceptions raised by the video scraper core."""

    default_message = "There was a generic error with VideoScraperCore"

    def __init__(self, message=None, context=None):
        self.message = self.default_message if message is None else message
        self.context = context
        super().__init__(self.message)


class VideoScraperCoreBrowserNotLaunchedError(VideoScraperCoreError):
    """Raised when a scrape is attempted on a browser that is not launched."""

    default_message = (
        'You cannot scrape if a browser was not launched. '
        'Use "scraper.launch()" before calling this method'
    )


class _WrappingError(VideoScraperCoreError):
    """Carries the error that caused it plus optional extra information."""

    def __init__(self, error=None, message=None, other_info=None):
        super().__init__(message, {"error": error, "other_info": other_info})

    @property
    def error(self):
        return self.context["error"]

    @property
    def other_info(self):
        return self.context["other_info"]


class VideoScraperCoreDuringBrowserLaunchError(_WrappingError):
    """Raised when the automation engine fails to launch the browser."""

    default_message = "There was an error during the browser launch."


class VideoScraperCoreDuringBrowserCloseError(_WrappingError):
    """Raised when the automation engine fails to close the browser."""

    default_message = "There was an error during the browser close."


class VideoScraperCoreDuringScrapingError(_WrappingError):
    """Raised when any step of a scrape fails; the original error is kept."""

    default_message = "There was an error during the scraping."
