"""Selenium-level helpers: errors, readiness polling, capture, retries and Chrome options."""

import os
import base64
from types import SimpleNamespace

import pytest
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    WebDriverException,
    StaleElementReferenceException,
    TimeoutException,
)

from mcp_browser_automation.actions import (
    get_page_html,
    save_screenshot,
    serialize_result,
    wait_for_network_idle,
)
from mcp_browser_automation.actions.navigation import PAGE_ACTIVITY_JS
from mcp_browser_automation.browser import build_chrome_options, make_session_id
from mcp_browser_automation.browser.process import browser_processes, reap_processes
from mcp_browser_automation.errors import describe_exception
from mcp_browser_automation.utils import retry_op
from mcp_browser_automation.utils.images import downscale_png

from _utils import FakeDriver, make_config


# ------------------------------
# describe_exception
# ------------------------------

def test_describe_exception_strips_selenium_noise():
    exc = WebDriverException("unknown error: net::ERR_NAME_NOT_RESOLVED", stacktrace=["frame 1", "frame 2"])
    assert "Stacktrace" in str(exc)
    assert describe_exception(exc) == "unknown error: net::ERR_NAME_NOT_RESOLVED"


def test_describe_exception_falls_back_to_class_name():
    assert describe_exception(TimeoutException()) == "TimeoutException"
    assert describe_exception(RuntimeError()) == "RuntimeError"


def test_describe_exception_plain_message():
    assert describe_exception(ValueError("  bad value \n")) == "bad value"


# ------------------------------
# Network idle polling
# ------------------------------

class ActivityDriver:
    """Replays a sequence of (readyState, resource count) samples, repeating the last."""

    def __init__(self, samples):
        self.samples = list(samples)
        self.polls = 0

    def execute_script(self, script):
        assert script == PAGE_ACTIVITY_JS
        self.polls += 1
        if len(self.samples) > 1:
            return self.samples.pop(0)
        return self.samples[0]


def test_network_idle_waits_for_complete_and_stable_count():
    driver = ActivityDriver([["loading", 1], ["interactive", 4], ["complete", 6], ["complete", 7]])
    assert wait_for_network_idle(driver, timeout=2.0, idle_ms=0) is True
    assert driver.polls >= 5


def test_network_idle_times_out_without_raising():
    driver = ActivityDriver([["loading", 0]])
    assert wait_for_network_idle(driver, timeout=0.05, idle_ms=0) is False


# ------------------------------
# Page content and screenshots
# ------------------------------

def test_get_page_html_falls_back_to_page_source():
    driver = FakeDriver(html="<html><body>source</body></html>")
    driver.execute_script = lambda script: None
    assert get_page_html(driver) == "<html><body>source</body></html>"


def test_save_screenshot_creates_directory(tmp_path):
    target = tmp_path / "shots" / "nested"
    data = base64.b64encode(b"png-bytes").decode()

    path = save_screenshot(data, str(target), "  ")

    assert path == os.path.join(str(target), "screenshot.png")
    with open(path, "rb") as f:
        assert f.read() == b"png-bytes"


def test_downscale_disabled_returns_input():
    assert downscale_png("not even base64", 0) == "not even base64"


def test_serialize_result_handles_non_json_values():
    text = serialize_result({"when": object})
    assert "class 'object'" in text


# ------------------------------
# retry_op
# ------------------------------

def test_retry_op_retries_transient_errors(monkeypatch):
    monkeypatch.setattr("mcp_browser_automation.utils.retry.time.sleep", lambda s: None)
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) < 3:
            raise StaleElementReferenceException("stale")
        return "ok"

    assert retry_op(flaky) == "ok"
    assert len(attempts) == 3


def test_retry_op_gives_up_after_retries(monkeypatch):
    monkeypatch.setattr("mcp_browser_automation.utils.retry.time.sleep", lambda s: None)

    def covered():
        raise ElementClickInterceptedException("covered")

    with pytest.raises(ElementClickInterceptedException):
        retry_op(covered, retries=1)


def test_retry_op_does_not_retry_other_errors():
    attempts = []

    def broken():
        attempts.append(1)
        raise ValueError("nope")

    with pytest.raises(ValueError):
        retry_op(broken)
    assert attempts == [1]


# ------------------------------
# Browser construction and processes
# ------------------------------

def test_chrome_options_are_headless_and_isolated():
    options = build_chrome_options(make_config(chrome_args=["--lang=de"], no_sandbox=True))
    assert "--headless=new" in options.arguments
    assert "--no-sandbox" in options.arguments
    assert "--window-size=1280,800" in options.arguments
    assert "--lang=de" in options.arguments
    assert not any(a.startswith("--user-data-dir") for a in options.arguments)


def test_chrome_options_headed_with_binary():
    options = build_chrome_options(make_config(headless=False, chrome_path="/opt/chrome/chrome"))
    assert "--headless=new" not in options.arguments
    assert options.binary_location == "/opt/chrome/chrome"


def test_session_ids_are_unique():
    ids = {make_session_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("session:") for i in ids)


def test_browser_processes_without_service():
    assert browser_processes(FakeDriver()) == []
    assert browser_processes(SimpleNamespace(service=SimpleNamespace(process=None))) == []


def test_reap_processes_nothing_alive():
    assert reap_processes([]) == []
