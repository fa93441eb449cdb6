import subprocess
import sys

from .browser import PlaywrightEngine
from .logger import logger


def playwright_install_command(browser_type=PlaywrightEngine.browser_type, with_deps=False):
    command = [sys.executable, "-m", "playwright", "install"]
    if with_deps:
        command.append("--with-deps")
    command.append(browser_type)
    return command


def install_playwright_browser(browser_type=PlaywrightEngine.browser_type, with_deps=False):
    """Install the browser the recording engine launches (plus its system libraries with ``with_deps``)."""
    command = playwright_install_command(browser_type, with_deps)
    logger.info(f"🧩 Installing Playwright {browser_type}{' with system dependencies' if with_deps else ''}...")
    try:
        subprocess.check_call(command)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.error(f"❌ Failed to install {browser_type}: {e}")
        return False
    logger.info(f"✅ {browser_type} is ready for recording.")
    return True
