"""Diagnostics and debugging information utility functions."""

import sys
import platform
from typing import Optional

import selenium


def collect_diagnostics(
    driver=None,
    exc: Optional[BaseException] = None,
    config: Optional[dict] = None,
) -> str:
    """
    Collect diagnostic information about the browser, driver, and environment.

    Args:
        driver: Selenium WebDriver instance, or None if no session is open
        exc: Exception that occurred (can be None)
        config: Configuration dictionary

    Returns:
        str: Formatted diagnostic information
    """
    config = config or {}

    parts = [
        f"OS                : {platform.system()} {platform.release()}",
        f"Python            : {sys.version.split()[0]}",
        f"Selenium          : {getattr(selenium, '__version__', '?')}",
        f"Chrome binary     : {config.get('chrome_path') or '<selenium manager>'}",
        f"Headless          : {config.get('headless')}",
        f"Driver initialized: {driver is not None}",
    ]

    if driver is not None:
        cap = getattr(driver, "capabilities", None) or {}
        parts.append(f"Browser version   : {cap.get('browserVersion') or '<unknown>'}")
        chrome_caps = cap.get("chrome") or {}
        drv_ver = chrome_caps.get("chromedriverVersion") or "<unknown>"
        parts.append(f"Driver version    : {drv_ver.split(' ')[0]}")
        try:
            parts.append(f"Current URL       : {driver.current_url}")
        except Exception:
            parts.append("Current URL       : <unavailable>")

    if exc is not None:
        parts += [
            "---- ERROR ----",
            f"Error type        : {type(exc).__name__}",
            f"Error message     : {exc}",
        ]

    return "\n".join(parts)


__all__ = ["collect_diagnostics"]
