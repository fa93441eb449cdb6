from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import List, Optional

import yaml

from .exceptions import VideoScraperCoreError
from .logger import logger


DEFAULT_CONFIG = {
    "browser": {
        "executable_path": None,
        "window_size": {"width": 1920, "height": 1080},
        "headless": False,
        "launch_args": [
            "--disable-blink-features=AutomationControlled",
            "--autoplay-policy=no-user-gesture-required",
        ],
        "debug": False,
        "debug_scope": None,
    },
    "scraping": {
        "duration": None,
        "full_screen": True,
        "delay_after_video_started": 1000,
        "delay_after_video_finished": 2000,
        "audio": True,
        "video": True,
        "mime_type": "video/webm",
        "audio_bits_per_second": 128000,
        "video_bits_per_second": 2500000,
        "frame_size": 20,
        "debug": None,
        "debug_scope": None,
        "use_global_debug": False,
        "timeout": None,
        "capture_selector": "video",
        "show_progress": False,
        "flush_timeout": 10000,
    },
    "selectors": {
        "video_duration": None,
        "full_screen": None,
        "play_button": None,
        "after_load_clicks": [],
    },
}


@dataclass(frozen=True)
class WindowSize:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise VideoScraperCoreError(f"Window dimensions must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class BrowserOptions:
    """Resolved browser configuration. Replaced wholesale, never mutated."""

    executable_path: Optional[str] = None
    window_size: WindowSize = field(default_factory=lambda: _default_window_size())
    headless: bool = False
    launch_args: List[str] = field(default_factory=lambda: list(DEFAULT_CONFIG["browser"]["launch_args"]))
    debug: bool = False
    debug_scope: Optional[str] = None


@dataclass
class ScrapingOptions:
    """
    Resolved per-call scraping configuration.

    ``duration`` is in milliseconds; ``None`` means it is read from the page.
    The after-page-loaded hook may change any field before the scrape reads it.
    """

    duration: Optional[int] = None
    full_screen: bool = True
    delay_after_video_started: int = 1000
    delay_after_video_finished: int = 2000
    audio: bool = True
    video: bool = True
    mime_type: str = "video/webm"
    audio_bits_per_second: int = 128000
    video_bits_per_second: int = 2500000
    frame_size: int = 20
    debug: Optional[bool] = None
    debug_scope: Optional[str] = None
    use_global_debug: bool = False
    timeout: Optional[int] = None
    capture_selector: str = "video"
    show_progress: bool = False
    flush_timeout: int = 10000

    def capture_options(self):
        """Options handed verbatim to the capture stream."""
        return {
            "audio": self.audio,
            "video": self.video,
            "mime_type": self.mime_type,
            "audio_bits_per_second": self.audio_bits_per_second,
            "video_bits_per_second": self.video_bits_per_second,
            "frame_size": self.frame_size,
            "capture_selector": self.capture_selector,
            "flush_timeout": self.flush_timeout,
        }


def _default_window_size():
    defaults = DEFAULT_CONFIG["browser"]["window_size"]
    return WindowSize(defaults["width"], defaults["height"])


def _dimension(value, default):
    if value is None:
        return default
    try:
        size = int(value)
    except (TypeError, ValueError):
        size = 0
    if size <= 0:
        logger.warning(f"⚠️ Ignoring invalid window dimension {value!r}, using {default}")
        return default
    return size


def _to_window_size(value):
    """Missing or invalid dimensions keep the default geometry."""
    if isinstance(value, WindowSize):
        return value
    default = _default_window_size()
    if isinstance(value, Mapping):
        width, height = value.get("width"), value.get("height")
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        width, height = value
    else:
        if value is not None:
            logger.warning(f"⚠️ Ignoring invalid window size {value!r}")
        return default
    return WindowSize(_dimension(width, default.width), _dimension(height, default.height))


def _known_overrides(record_type, options):
    """Keep only the keys the record knows about; unknown keys are ignored."""
    if options is None:
        return {}
    if isinstance(options, record_type):
        return {f.name: getattr(options, f.name) for f in fields(record_type)}
    names = {f.name for f in fields(record_type)}
    return {key: value for key, value in options.items() if key in names}


def handle_browser_options(options=None):
    """Merge partial browser options over the defaults into a BrowserOptions."""
    overrides = _known_overrides(BrowserOptions, options)
    if "window_size" in overrides:
        overrides["window_size"] = _to_window_size(overrides["window_size"])
    if "launch_args" in overrides:
        overrides["launch_args"] = list(overrides["launch_args"] or [])
    return replace(BrowserOptions(), **overrides)


def handle_scraping_options(options=None):
    """Merge partial scraping options over the defaults into a fresh ScrapingOptions."""
    overrides = _known_overrides(ScrapingOptions, options)
    return replace(ScrapingOptions(), **overrides)


def load_config(config_path=None):
    """
    Load configuration from a YAML file, section by section over DEFAULT_CONFIG.
    Returns the defaults when no path is given or the file does not exist.
    """
    config = deepcopy(DEFAULT_CONFIG)
    if not config_path:
        return config

    config_file = Path(config_path).expanduser()
    if not config_file.exists():
        return config

    with config_file.open("r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, Mapping):
        raise VideoScraperCoreError(f"Config file {config_file} must contain a mapping at the top level")

    for section, values in loaded.items():
        if section not in config or not isinstance(values, Mapping):
            continue
        config[section].update(values)
    return config
