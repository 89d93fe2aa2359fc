"""Screenshot capture and page markup."""

import os
import re
import base64
from typing import Optional

import logging
logger = logging.getLogger(__name__)

DOCUMENT_HTML_JS = "return document.documentElement ? document.documentElement.outerHTML : '';"


def capture_screenshot(driver, full_page: bool = True) -> str:
    """
    Capture the page as a base64-encoded PNG.

    Full-page captures go through CDP `Page.captureScreenshot` with the clip
    set to the whole document; viewport captures use WebDriver directly.
    """
    if not full_page:
        return driver.get_screenshot_as_base64()

    params = {"format": "png", "captureBeyondViewport": True, "fromSurface": True}
    try:
        metrics = driver.execute_cdp_cmd("Page.getLayoutMetrics", {}) or {}
        size = metrics.get("cssContentSize") or metrics.get("contentSize") or {}
        if size.get("width") and size.get("height"):
            params["clip"] = {
                "x": 0,
                "y": 0,
                "width": size["width"],
                "height": size["height"],
                "scale": 1,
            }
    except Exception as e:
        logger.debug(f"Layout metrics unavailable, capturing without clip: {e}")

    result = driver.execute_cdp_cmd("Page.captureScreenshot", params) or {}
    data = result.get("data")
    if not data:
        raise RuntimeError("Full-page capture returned no image data")
    return data


def set_viewport(driver, width: int, height: int) -> None:
    driver.set_window_size(int(width), int(height))


_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def save_screenshot(png_b64: str, directory: str, name: str) -> str:
    """Write the PNG to `<directory>/<name>.png` and return the absolute path."""
    safe = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("._") or "screenshot"
    os.makedirs(directory, exist_ok=True)
    path = os.path.abspath(os.path.join(directory, f"{safe}.png"))
    with open(path, "wb") as f:
        f.write(base64.b64decode(png_b64))
    return path


def get_page_html(driver) -> str:
    """Return the full document markup, preferring outerHTML over page_source."""
    html: Optional[str] = None
    try:
        html = driver.execute_script(DOCUMENT_HTML_JS)
    except Exception as e:
        logger.debug(f"outerHTML unavailable, falling back to page_source: {e}")
    if not html:
        html = driver.page_source or ""
    return html


__all__ = [
    "DOCUMENT_HTML_JS",
    "capture_screenshot",
    "set_viewport",
    "save_screenshot",
    "get_page_html",
]
