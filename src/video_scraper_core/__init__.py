from .adapters import SelectorSiteAdapter, SiteAdapter
from .config import (
    BrowserOptions,
    ScrapingOptions,
    WindowSize,
    handle_browser_options,
    handle_scraping_options,
    load_config,
)
from .exceptions import (
    VideoScraperCoreBrowserNotLaunchedError,
    VideoScraperCoreDuringBrowserCloseError,
    VideoScraperCoreDuringBrowserLaunchError,
    VideoScraperCoreDuringScrapingError,
    VideoScraperCoreError,
)
from .logger import ScraperLogger
from .scraper import BrowserState, VideoScraperCore
from .utils import parse_duration_text

__version__ = "0.1.0"
