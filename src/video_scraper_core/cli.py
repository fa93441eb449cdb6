import argparse
import asyncio
import sys

from .adapters import SelectorSiteAdapter
from .browser import PlaywrightEngine
from .config import load_config
from .exceptions import VideoScraperCoreError
from .installer import install_playwright_browser
from .logger import logger, setup_logger
from .scraper import VideoScraperCore


async def run_scraper(url, output, config_path=None, duration_ms=None, full_screen=None,
                      headless=None, debug=False, show_progress=False):
    config = load_config(config_path)

    try:
        adapter = SelectorSiteAdapter.from_config(config["selectors"])
    except ValueError as e:
        logger.error(f"🚫 [ERROR] {e}")
        logger.error("Add them to the 'selectors' section of your config file (see --config).")
        return 1

    browser_options = dict(config["browser"])
    scraping_options = dict(config["scraping"])

    # Apply overrides from CLI
    if headless is not None:
        browser_options["headless"] = headless
    if debug:
        browser_options["debug"] = True
    if duration_ms is not None:
        scraping_options["duration"] = duration_ms
    if full_screen is not None:
        scraping_options["full_screen"] = full_screen
    if show_progress:
        scraping_options["show_progress"] = True

    scraper = VideoScraperCore(adapter, browser_options)
    try:
        await scraper.launch()
        logger.info(f"🎬 Recording {url} -> {output}")
        await scraper.scrape(url, output, scraping_options)
        logger.info(f"✅ Video saved: {output}")
        return 0
    except VideoScraperCoreError as e:
        _log_error(e)
        return 1
    finally:
        try:
            await scraper.close()
        except VideoScraperCoreError as e:
            _log_error(e)


def _log_error(error):
    cause = error.context.get("error") if isinstance(error.context, dict) else None
    logger.error(f"❌ {error.message}" + (f" {cause}" if cause else ""))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Record a video played in a browser page to a file")
    parser.add_argument("url", help="Page that plays the video")
    parser.add_argument("output", help="Destination file (webm by default)")
    parser.add_argument("-c", "--config", help="Path to a config.yaml with browser, scraping and selectors sections")
    parser.add_argument("-d", "--duration-ms", type=int, help="Record length in ms instead of reading it from the page")
    parser.add_argument("--no-fullscreen", action="store_false", dest="full_screen", default=None,
                        help="Do not click the fullscreen control before playing")
    parser.add_argument("--headless", action="store_true", help="Run browser in headless mode")
    parser.add_argument("--no-headless", action="store_false", dest="headless", help="Run browser in windowed mode")
    parser.set_defaults(headless=None)
    parser.add_argument("--debug", action="store_true", help="Print debug lines for every scraping step")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while recording")
    parser.add_argument("--install-browser", action="store_true", help="Install the browser the recorder launches first")
    parser.add_argument("--with-deps", action="store_true", help="With --install-browser, also install its system libraries")
    parser.add_argument("--log-file", help="Also write errors to this file")

    args = parser.parse_args(argv)
    setup_logger(log_file=args.log_file)

    if args.install_browser and not install_playwright_browser(PlaywrightEngine.browser_type, with_deps=args.with_deps):
        sys.exit(1)

    try:
        code = asyncio.run(run_scraper(
            args.url,
            args.output,
            config_path=args.config,
            duration_ms=args.duration_ms,
            full_screen=args.full_screen,
            headless=args.headless,
            debug=args.debug,
            show_progress=args.progress,
        ))
    except KeyboardInterrupt:
        logger.info("\n👋 Program terminated by user.")
        sys.exit(0)
    sys.exit(code)


if __name__ == "__main__":
    main()
