"""Browser launch and process management."""

from .driver import build_chrome_options, build_chrome_service, create_webdriver
from .process import browser_processes, make_session_id, reap_processes

__all__ = [
    "build_chrome_options",
    "build_chrome_service",
    "create_webdriver",
    "browser_processes",
    "make_session_id",
    "reap_processes",
]
