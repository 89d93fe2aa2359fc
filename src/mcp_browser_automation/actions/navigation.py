"""Navigation and page readiness."""

import time

from ..constants import NETWORK_IDLE_POLL_SECS

import logging
logger = logging.getLogger(__name__)

PAGE_ACTIVITY_JS = (
    "return [document.readyState, "
    "performance.getEntriesByType('resource').length];"
)
"""Ready state plus the number of resources fetched so far."""


def wait_for_network_idle(driver, timeout: float, idle_ms: int) -> bool:
    """
    Wait until the document is complete and no new resources load for `idle_ms`.

    Selenium has no network-idle event, so activity is approximated by the
    count of `performance` resource entries. Returns False on timeout; callers
    treat that as non-fatal.
    """
    deadline = time.monotonic() + max(timeout, 0)
    idle_secs = max(idle_ms, 0) / 1000.0
    last_count = None
    stable_since = time.monotonic()

    while True:
        state, count = driver.execute_script(PAGE_ACTIVITY_JS)
        now = time.monotonic()
        if state != "complete" or count != last_count:
            last_count = count
            stable_since = now
        elif now - stable_since >= idle_secs:
            return True

        if now >= deadline:
            logger.debug(f"Network did not go idle within {timeout}s (state={state}, resources={count})")
            return False
        time.sleep(min(NETWORK_IDLE_POLL_SECS, max(idle_secs, 0.01)))


def navigate_to_url(driver, url: str, timeout: float, idle_ms: int) -> bool:
    """
    Load `url` and wait for network idle.

    Raises whatever the driver raises for unreachable or malformed URLs and for
    page-load timeouts. Returns whether network idle was reached.
    """
    driver.get(url)
    return wait_for_network_idle(driver, timeout=timeout, idle_ms=idle_ms)


__all__ = [
    "PAGE_ACTIVITY_JS",
    "wait_for_network_idle",
    "navigate_to_url",
]
