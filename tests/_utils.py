# tests/_utils.py
"""Fake Selenium objects so tests never start a real browser."""

import base64
from types import SimpleNamespace

from selenium.common.exceptions import (
    InvalidArgumentException,
    NoSuchElementException,
    NoSuchWindowException,
    WebDriverException,
)

from mcp_browser_automation.actions.navigation import PAGE_ACTIVITY_JS
from mcp_browser_automation.actions.screenshots import DOCUMENT_HTML_JS
from mcp_browser_automation.actions.scripting import SETTLE_WITHIN_JS

VIEWPORT_PNG = base64.b64encode(b"viewport-png").decode()
FULL_PAGE_PNG = base64.b64encode(b"full-page-png").decode()

DEFAULT_HTML = "<html><head><title>Fake</title></head><body><h1>Hello</h1></body></html>"


def make_config(**overrides) -> dict:
    config = {
        "headless": True,
        "chrome_path": None,
        "chromedriver_path": None,
        "chromedriver_log": None,
        "no_sandbox": False,
        "chrome_args": [],
        "window_width": 1280,
        "window_height": 800,
        "page_load_timeout": 2.0,
        "element_timeout": 0.2,
        "script_timeout": 2.0,
        "network_idle_ms": 0,
        "screenshot_dir": None,
        "screenshot_max_width": 0,
        "busy_policy": "queue",
        "log_level": "WARNING",
    }
    config.update(overrides)
    return config


UNDEFINED = object()


class Unserializable:
    """A JavaScript value without a JSON form, such as NaN or a bigint."""

    def __init__(self, text):
        self.text = text


class FakePromise:
    """A promise that settles to `value`; an Exception value rejects it."""

    def __init__(self, value):
        self.value = value


class FakeElement:
    def __init__(self, displayed=True, enabled=True, value=""):
        self.displayed = displayed
        self.enabled = enabled
        self.value = value
        self.clicks = 0

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        return self.enabled

    def click(self):
        self.clicks += 1

    def clear(self):
        self.value = ""

    def send_keys(self, *keys):
        self.value += "".join(keys)


class FakeDriver:
    """
    Just enough of selenium.webdriver.Chrome for the actions in this package.

    Args:
        elements: CSS selector -> FakeElement
        eval_results: script source -> value. An Exception simulates a throw, a
            FakePromise an async result, UNDEFINED and Unserializable the values
            DevTools cannot return as JSON.
        html: markup returned for the document
    """

    def __init__(self, elements=None, eval_results=None, html=DEFAULT_HTML, page="page-1"):
        self.elements = dict(elements or {})
        self.eval_results = dict(eval_results or {})
        self.html = html
        self.window_handles = [page]
        self.current_window_handle = page
        self.current_url = "about:blank"
        self.capabilities = {"browserVersion": "120.0", "chrome": {"chromedriverVersion": "120.0.1 (abc)"}}
        self.visited = []
        self.cdp_calls = []
        self.remote_objects = {}
        self.window_sizes = []
        self.quit_calls = 0
        self.page_load_timeout = None
        self.script_timeout = None
        self.switch_to = SimpleNamespace(window=self._switch_window)

    def _switch_window(self, handle):
        if handle not in self.window_handles:
            raise NoSuchWindowException(f"no such window: {handle}")
        self.current_window_handle = handle

    def set_page_load_timeout(self, seconds):
        self.page_load_timeout = seconds

    def set_script_timeout(self, seconds):
        self.script_timeout = seconds

    def set_window_size(self, width, height):
        self.window_sizes.append((width, height))

    def get(self, url):
        if not url.startswith(("http://", "https://", "about:", "data:", "file:")):
            raise InvalidArgumentException("invalid argument\n  (Session info: chrome=120.0)")
        if "unreachable" in url:
            raise WebDriverException("unknown error: net::ERR_NAME_NOT_RESOLVED")
        self.visited.append(url)
        self.current_url = url

    def execute_script(self, script, *args):
        if script == PAGE_ACTIVITY_JS:
            return ["complete", 3]
        if script == DOCUMENT_HTML_JS:
            return self.html
        raise AssertionError(f"unexpected script: {script!r}")

    def execute_cdp_cmd(self, cmd, params):
        self.cdp_calls.append((cmd, params))
        if cmd == "Page.getLayoutMetrics":
            return {"cssContentSize": {"x": 0, "y": 0, "width": 1280, "height": 4000}}
        if cmd == "Page.captureScreenshot":
            return {"data": FULL_PAGE_PNG}
        if cmd == "Runtime.evaluate":
            return self._remote(self.eval_results[params["expression"]], by_value=params.get("returnByValue", False))
        if cmd == "Runtime.callFunctionOn":
            assert params["functionDeclaration"] == SETTLE_WITHIN_JS
            value = self.remote_objects[params["objectId"]]
            if isinstance(value, FakePromise):
                value = value.value
            return self._remote(value, by_value=params.get("returnByValue", False))
        if cmd == "Runtime.releaseObjectGroup":
            self.remote_objects.clear()
            return {}
        raise AssertionError(f"unexpected CDP command: {cmd}")

    def _remote(self, value, by_value):
        """Shape `value` like a DevTools Runtime response."""
        if isinstance(value, Exception):
            return {
                "result": {"type": "object", "subtype": "error"},
                "exceptionDetails": {
                    "text": "Uncaught",
                    "exception": {"type": "object", "description": f"{value.__class__.__name__}: {value}"},
                },
            }
        if value is UNDEFINED:
            return {"result": {"type": "undefined"}}
        if isinstance(value, Unserializable):
            return {"result": {"type": "number", "unserializableValue": value.text}}
        if isinstance(value, (dict, list, FakePromise)) and not by_value:
            object_id = f"obj-{len(self.remote_objects) + 1}"
            self.remote_objects[object_id] = value
            remote = {"type": "object", "objectId": object_id}
            if isinstance(value, FakePromise):
                remote["subtype"] = "promise"
            return {"result": remote}
        return {"result": {"type": "object", "value": value}}

    def get_screenshot_as_base64(self):
        return VIEWPORT_PNG

    def find_element(self, by, selector):
        el = self.elements.get(selector)
        if el is None:
            raise NoSuchElementException(f"no such element: {selector}")
        return el

    @property
    def page_source(self):
        return self.html

    def quit(self):
        self.quit_calls += 1
        self.window_handles = []


class DriverFactory:
    """Driver factory that records every driver it creates."""

    def __init__(self, **driver_kwargs):
        self.driver_kwargs = driver_kwargs
        self.created = []

    def __call__(self, config):
        driver = FakeDriver(**self.driver_kwargs)
        self.created.append(driver)
        return driver
