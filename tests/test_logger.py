import logging

from video_scraper_core import logger as logger_module
from video_scraper_core.logger import ScraperLogger, setup_logger


def test_debug_is_silent_when_disabled(caplog):
    caplog.set_level(logging.DEBUG, logger="video_scraper_core")

    ScraperLogger(debug=False, scope="Quiet").debug("should not appear", {"a": 1})

    assert not [r for r in caplog.records if "should not appear" in r.getMessage()]


def test_debug_line_carries_scope_and_data(caplog):
    caplog.set_level(logging.DEBUG, logger="video_scraper_core")

    ScraperLogger(debug=True, scope="Site").debug("Duration is", "0:00:02", 2000)

    messages = [r.getMessage() for r in caplog.records if r.name == "video_scraper_core.Site"]
    assert messages == ["[Site] Duration is 0:00:02 2000"]


def test_setup_logger_does_not_duplicate_handlers():
    first = setup_logger()
    count = len(first.handlers)

    second = setup_logger()

    assert second is first
    assert len(second.handlers) == count
    assert second.name == logger_module.LOGGER_NAME


def test_unscoped_debug_logger_leaves_package_level_alone(caplog):
    package_logger = logging.getLogger("video_scraper_core")
    package_logger.setLevel(logging.INFO)
    caplog.set_level(logging.DEBUG)

    ScraperLogger(debug=True).debug("step line")
    package_logger.debug("package debug line")

    assert package_logger.level == logging.INFO
    names = [(r.name, r.getMessage()) for r in caplog.records]
    assert ("video_scraper_core.steps", "step line") in names
    assert ("video_scraper_core", "package debug line") not in names
