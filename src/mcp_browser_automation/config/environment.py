"""Environment configuration and validation."""

import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

from ..constants import (
    BUSY_POLICIES,
    BUSY_POLICY_QUEUE,
    DEFAULT_ELEMENT_TIMEOUT_SECS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NETWORK_IDLE_MS,
    DEFAULT_PAGE_LOAD_TIMEOUT_SECS,
    DEFAULT_SCRIPT_TIMEOUT_SECS,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)

import logging
logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def load_env_file() -> Optional[str]:
    """
    Load a `.env` file found from the current working directory upwards.

    Variables already present in the process environment win, so a host that
    launches the server with explicit `env` settings is never overridden.

    Returns the path of the loaded file, or None if no file was found.
    """
    path = find_dotenv(filename=".env", usecwd=True)
    if not path:
        return None
    load_dotenv(path, override=False)
    logger.debug(f"Loaded environment from {path}")
    return path


def _env_str(name: str) -> Optional[str]:
    return (os.getenv(name) or "").strip() or None


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise EnvironmentError(f"{name} must be a boolean (1/0, true/false), got {raw!r}.")


def _env_number(name: str, default, cast=float, minimum=0):
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}.") from None
    if value < minimum:
        raise EnvironmentError(f"{name} must be >= {minimum}, got {value}.")
    return value


def _parse_window_size(raw: Optional[str]):
    if not raw:
        return DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
    parts = raw.lower().replace(",", "x").split("x")
    try:
        width, height = (int(p.strip()) for p in parts)
    except ValueError:
        raise EnvironmentError(
            f"MCP_BROWSER_WINDOW_SIZE must look like 1280x800, got {raw!r}."
        ) from None
    if width <= 0 or height <= 0:
        raise EnvironmentError(f"MCP_BROWSER_WINDOW_SIZE must be positive, got {raw!r}.")
    return width, height


def get_env_config() -> dict:
    """
    Read environment variables and validate them.

    Optional:   MCP_BROWSER_HEADLESS (default 1)
                MCP_BROWSER_CHROME_PATH
                MCP_BROWSER_CHROMEDRIVER_PATH
                MCP_BROWSER_CHROMEDRIVER_LOG
                MCP_BROWSER_NO_SANDBOX (default 0, needed inside most containers)
                MCP_BROWSER_CHROME_ARGS (comma separated extra Chrome flags)
                MCP_BROWSER_WINDOW_SIZE (default 1280x800)
                MCP_BROWSER_PAGE_LOAD_TIMEOUT, MCP_BROWSER_ELEMENT_TIMEOUT,
                MCP_BROWSER_SCRIPT_TIMEOUT (seconds, default 30)
                MCP_BROWSER_NETWORK_IDLE_MS (default 500)
                MCP_BROWSER_SCREENSHOT_DIR
                MCP_BROWSER_SCREENSHOT_MAX_WIDTH (pixels, 0 disables downscaling)
                MCP_BROWSER_BUSY_POLICY ('queue' or 'reject', default 'queue')
                MCP_BROWSER_LOG_LEVEL (default WARNING)

    Raises:
        EnvironmentError: if any value is malformed.
    """
    width, height = _parse_window_size(_env_str("MCP_BROWSER_WINDOW_SIZE"))

    chrome_args = [
        a.strip() for a in (os.getenv("MCP_BROWSER_CHROME_ARGS") or "").split(",") if a.strip()
    ]

    busy_policy = (_env_str("MCP_BROWSER_BUSY_POLICY") or BUSY_POLICY_QUEUE).lower()
    if busy_policy not in BUSY_POLICIES:
        raise EnvironmentError(
            f"MCP_BROWSER_BUSY_POLICY must be one of {', '.join(BUSY_POLICIES)}, got {busy_policy!r}."
        )

    log_level = (_env_str("MCP_BROWSER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise EnvironmentError(f"MCP_BROWSER_LOG_LEVEL is not a logging level: {log_level!r}.")

    return {
        "headless": _env_bool("MCP_BROWSER_HEADLESS", True),
        "chrome_path": _env_str("MCP_BROWSER_CHROME_PATH"),
        "chromedriver_path": _env_str("MCP_BROWSER_CHROMEDRIVER_PATH"),
        "chromedriver_log": _env_str("MCP_BROWSER_CHROMEDRIVER_LOG"),
        "no_sandbox": _env_bool("MCP_BROWSER_NO_SANDBOX", False),
        "chrome_args": chrome_args,
        "window_width": width,
        "window_height": height,
        "page_load_timeout": _env_number("MCP_BROWSER_PAGE_LOAD_TIMEOUT", DEFAULT_PAGE_LOAD_TIMEOUT_SECS, minimum=0.1),
        "element_timeout": _env_number("MCP_BROWSER_ELEMENT_TIMEOUT", DEFAULT_ELEMENT_TIMEOUT_SECS, minimum=0.1),
        "script_timeout": _env_number("MCP_BROWSER_SCRIPT_TIMEOUT", DEFAULT_SCRIPT_TIMEOUT_SECS, minimum=0.1),
        "network_idle_ms": _env_number("MCP_BROWSER_NETWORK_IDLE_MS", DEFAULT_NETWORK_IDLE_MS, cast=int),
        "screenshot_dir": _env_str("MCP_BROWSER_SCREENSHOT_DIR"),
        "screenshot_max_width": _env_number("MCP_BROWSER_SCREENSHOT_MAX_WIDTH", 0, cast=int),
        "busy_policy": busy_policy,
        "log_level": log_level,
    }
