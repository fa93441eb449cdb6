import logging
import sys

LOGGER_NAME = "video_scraper_core"
DEFAULT_SCOPE = "steps"


def setup_logger(log_file=None, level=logging.INFO):
    """Set up the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_video_scraper_core", False) for h in logger.handlers):
        # Create handlers
        c_handler = logging.StreamHandler(sys.stdout)
        c_handler.setLevel(logging.DEBUG)
        c_handler.setFormatter(logging.Formatter('%(message)s'))
        c_handler._video_scraper_core = True
        logger.addHandler(c_handler)

    if log_file:
        f_handler = logging.FileHandler(log_file)
        f_handler.setLevel(logging.ERROR)
        f_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(f_handler)

    return logger


logger = logging.getLogger(LOGGER_NAME)


class ScraperLogger:
    """
    Scoped debug logger handed to the orchestrator and to site adapters.

    ``debug()`` does nothing unless the logger was built with ``debug=True``;
    otherwise each line goes to the ``video_scraper_core.<scope>`` logger
    (``video_scraper_core.steps`` when no scope is given).
    """

    def __init__(self, debug=False, scope=None):
        self.enabled = bool(debug)
        self.scope = scope
        # always a child: the package logger level is left alone
        self._logger = logging.getLogger(f"{LOGGER_NAME}.{scope or DEFAULT_SCOPE}")
        if self.enabled:
            self._logger.setLevel(logging.DEBUG)

    def debug(self, message, *data):
        if not self.enabled:
            return
        parts = [str(message)]
        parts.extend(item if isinstance(item, str) else repr(item) for item in data)
        line = " ".join(parts)
        if self.scope:
            line = f"[{self.scope}] {line}"
        self._logger.debug(line)
