import subprocess
import sys

from video_scraper_core import installer
from video_scraper_core.browser import PlaywrightEngine


def test_install_command_targets_engine_browser():
    assert installer.playwright_install_command() == [
        sys.executable, "-m", "playwright", "install", PlaywrightEngine.browser_type
    ]
    assert installer.playwright_install_command("chromium", with_deps=True)[-2:] == ["--with-deps", "chromium"]


def test_install_success(monkeypatch):
    commands = []
    monkeypatch.setattr(installer.subprocess, "check_call", lambda command: commands.append(command))

    assert installer.install_playwright_browser(with_deps=True) is True
    assert commands == [[sys.executable, "-m", "playwright", "install", "--with-deps", "chromium"]]


def test_install_failure_is_reported(monkeypatch):
    def fail(command):
        raise subprocess.CalledProcessError(1, command)

    monkeypatch.setattr(installer.subprocess, "check_call", fail)

    assert installer.install_playwright_browser() is False
