"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

# ============================================================================
# Server Identity
# ============================================================================

SERVER_NAME = "mcp-browser-automation"
"""Name announced to MCP clients during initialization."""

SERVER_VERSION = "0.1.0"


# ============================================================================
# Browser Defaults
# ============================================================================

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 800

DEFAULT_PAGE_LOAD_TIMEOUT_SECS = 30.0
"""Maximum time for a navigation to finish loading."""

DEFAULT_ELEMENT_TIMEOUT_SECS = 30.0
"""Maximum time to wait for a selector to match a visible element."""

DEFAULT_SCRIPT_TIMEOUT_SECS = 30.0
"""Maximum time for an evaluated script (including awaited promises)."""

DEFAULT_NETWORK_IDLE_MS = 500
"""How long the resource count must stay unchanged before the page counts as idle."""

NETWORK_IDLE_POLL_SECS = 0.1

BASE_CHROME_ARGS = (
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-extensions",
    "--disable-dev-shm-usage",
)


# ============================================================================
# Dispatch
# ============================================================================

BUSY_POLICY_QUEUE = "queue"
BUSY_POLICY_REJECT = "reject"
BUSY_POLICIES = (BUSY_POLICY_QUEUE, BUSY_POLICY_REJECT)

DEFAULT_LOG_LEVEL = "WARNING"


__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "DEFAULT_WINDOW_WIDTH",
    "DEFAULT_WINDOW_HEIGHT",
    "DEFAULT_PAGE_LOAD_TIMEOUT_SECS",
    "DEFAULT_ELEMENT_TIMEOUT_SECS",
    "DEFAULT_SCRIPT_TIMEOUT_SECS",
    "DEFAULT_NETWORK_IDLE_MS",
    "NETWORK_IDLE_POLL_SECS",
    "BASE_CHROME_ARGS",
    "BUSY_POLICY_QUEUE",
    "BUSY_POLICY_REJECT",
    "BUSY_POLICIES",
    "DEFAULT_LOG_LEVEL",
]
