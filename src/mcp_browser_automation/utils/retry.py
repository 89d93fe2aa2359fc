"""Retry logic for transient Selenium failures."""

import time
import random
from typing import Callable
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    StaleElementReferenceException,
)

import logging
logger = logging.getLogger(__name__)

TRANSIENT_EXCEPTIONS = (
    StaleElementReferenceException,
    ElementClickInterceptedException,
)


def retry_op(op: Callable, retries: int = 2, base_delay: float = 0.15, retry_on=TRANSIENT_EXCEPTIONS):
    """
    Retry a function call that may fail due to transient Selenium exceptions.

    Args:
        op: The zero-argument callable to run
        retries: Number of retry attempts after the first call (default: 2)
        base_delay: Base delay between retries in seconds, jittered up to 2x (default: 0.15)
        retry_on: Exception types considered transient

    Returns:
        The result of the call

    Raises:
        The last exception if all retries fail, or any non-transient exception immediately
    """
    for attempt in range(retries + 1):
        try:
            return op()
        except retry_on as e:
            if attempt == retries:
                raise
            logger.debug(f"Transient {e.__class__.__name__} (attempt {attempt + 1}/{retries + 1}); retrying")
            time.sleep(base_delay * (1.0 + random.random()))


__all__ = ["retry_op", "TRANSIENT_EXCEPTIONS"]
