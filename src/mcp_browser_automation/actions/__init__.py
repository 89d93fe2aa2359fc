"""Low-level browser actions operating on a WebDriver."""

from .navigation import navigate_to_url, wait_for_network_idle
from .elements import click_element, fill_element, find_element
from .screenshots import capture_screenshot, get_page_html, save_screenshot, set_viewport
from .scripting import evaluate_script, serialize_result

__all__ = [
    "navigate_to_url",
    "wait_for_network_idle",
    "click_element",
    "fill_element",
    "find_element",
    "capture_screenshot",
    "get_page_html",
    "save_screenshot",
    "set_viewport",
    "evaluate_script",
    "serialize_result",
]
