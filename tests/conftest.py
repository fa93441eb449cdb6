from __future__ import annotations

import pytest

from video_scraper_core.adapters import SiteAdapter


class FakePage:
    """Records every call the orchestrator makes against a page, in order."""

    def __init__(self, texts: dict | None = None, fail_on: dict | None = None):
        self.calls: list[tuple] = []
        self.texts = texts or {}
        self.fail_on = fail_on or {}

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        error = self.fail_on.get(name)
        if error is not None:
            raise error

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def set_default_timeout(self, timeout: int) -> None:
        self._record("set_default_timeout", timeout)

    async def goto(self, url: str, wait_until: str | None = None) -> None:
        self._record("goto", url, wait_until)

    async def wait_for_selector(self, selector: str) -> None:
        self._record("wait_for_selector", selector)

    async def eval_on_selector(self, selector: str, expression: str):
        self._record("eval_on_selector", selector)
        return self.texts.get(selector)

    async def click(self, selector: str) -> None:
        self._record("click", selector)

    async def wait_for_timeout(self, timeout: int) -> None:
        self._record("wait_for_timeout", timeout)

    async def close(self) -> None:
        self._record("close_page")


class FakeStream:
    def __init__(self, page: FakePage):
        self.page = page
        self.sink = None

    def pipe(self, sink):
        self.sink = sink
        sink.write(b"webm-bytes")
        return sink

    async def destroy(self) -> None:
        self.page._record("stop_capture")


class FakeBrowser:
    def __init__(self, page: FakePage, close_error: Exception | None = None):
        self.page = page
        self.close_error = close_error
        self.pages_opened = 0
        self.closed = 0

    async def new_page(self) -> FakePage:
        self.pages_opened += 1
        return self.page

    async def close(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error


class FakeEngine:
    def __init__(self, page: FakePage | None = None, launch_error: Exception | None = None,
                 close_error: Exception | None = None):
        self.page = page or FakePage()
        self.launch_error = launch_error
        self.browser = FakeBrowser(self.page, close_error)
        self.launch_calls: list[tuple] = []
        self.capture_options: dict | None = None

    async def launch(self, executable_path, window_size, args=(), headless=False):
        self.launch_calls.append((executable_path, window_size, list(args), headless))
        if self.launch_error is not None:
            raise self.launch_error
        return self.browser

    async def get_stream(self, page: FakePage, capture_options: dict) -> FakeStream:
        self.capture_options = capture_options
        page._record("start_capture")
        return FakeStream(page)


class DemoAdapter(SiteAdapter):
    def __init__(self, duration_from_hook: int | None = None):
        self.duration_from_hook = duration_from_hook
        self.hook_calls: list[tuple] = []

    async def after_page_loaded(self, options, page, logger):
        self.hook_calls.append((options, page, logger))
        page._record("after_page_loaded")
        if self.duration_from_hook is not None:
            options.duration = self.duration_from_hook

    def get_video_duration_selector(self):
        return "#duration"

    def get_full_screen_selector(self):
        return "#fullscreen"

    def get_play_button_selector(self):
        return "#play"


@pytest.fixture
def page() -> FakePage:
    return FakePage(texts={"#duration": "0:00:02"})


@pytest.fixture
def engine(page: FakePage) -> FakeEngine:
    return FakeEngine(page)


@pytest.fixture
def adapter() -> DemoAdapter:
    return DemoAdapter()
