"""Element finding and interaction."""

from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import TimeoutException

from ..errors import AutomationError, ElementNotFoundError
from ..utils.retry import retry_op


def find_element(driver, selector: str, timeout: float):
    """
    Wait for a visible element matching the CSS `selector`.

    Raises:
        ElementNotFoundError: if nothing visible matches within `timeout`.
    """
    try:
        return WebDriverWait(driver, timeout).until(
            EC.visibility_of_element_located((By.CSS_SELECTOR, selector))
        )
    except TimeoutException:
        raise ElementNotFoundError(selector, timeout) from None


def click_element(driver, selector: str, timeout: float) -> None:
    """Click the element matched by `selector`, re-locating it if it went stale or was covered."""
    def _click():
        el = find_element(driver, selector, timeout)
        try:
            WebDriverWait(driver, timeout).until(lambda d: el.is_displayed() and el.is_enabled())
        except TimeoutException:
            raise AutomationError(f"Element '{selector}' did not become clickable within {timeout:g}s") from None
        el.click()

    retry_op(_click)


def fill_element(driver, selector: str, value: str, timeout: float) -> None:
    """Replace the value of the input matched by `selector` with `value`."""
    def _fill():
        el = find_element(driver, selector, timeout)
        el.clear()
        el.send_keys(value)

    retry_op(_fill)


__all__ = [
    "find_element",
    "click_element",
    "fill_element",
]
