"""WebDriver creation for the single headless browser session."""

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service as ChromeService

from ..constants import BASE_CHROME_ARGS

import logging
logger = logging.getLogger(__name__)


def build_chrome_options(config: dict) -> Options:
    """
    Chrome options for an isolated session.

    No user-data-dir is passed, so chromedriver gives every session a fresh
    temporary profile that is discarded on quit.
    """
    options = Options()
    chrome_path = config.get("chrome_path")
    if chrome_path:
        options.binary_location = chrome_path

    if config.get("headless", True):
        options.add_argument("--headless=new")
    if config.get("no_sandbox"):
        options.add_argument("--no-sandbox")

    width = config.get("window_width")
    height = config.get("window_height")
    if width and height:
        options.add_argument(f"--window-size={width},{height}")

    for arg in BASE_CHROME_ARGS:
        options.add_argument(arg)
    for arg in config.get("chrome_args") or ():
        options.add_argument(arg)

    return options


def build_chrome_service(config: dict) -> ChromeService:
    kwargs = {}
    if config.get("chromedriver_path"):
        kwargs["executable_path"] = config["chromedriver_path"]
    if config.get("chromedriver_log"):
        kwargs["log_output"] = config["chromedriver_log"]
    return ChromeService(**kwargs)


def create_webdriver(config: dict) -> webdriver.Chrome:
    """Launch Chrome through chromedriver with options derived from `config`."""
    options = build_chrome_options(config)
    service = build_chrome_service(config)
    logger.info(
        f"Launching Chrome (headless={config.get('headless', True)}, "
        f"binary={config.get('chrome_path') or '<selenium manager>'})"
    )
    return webdriver.Chrome(service=service, options=options)


__all__ = [
    "build_chrome_options",
    "build_chrome_service",
    "create_webdriver",
]
