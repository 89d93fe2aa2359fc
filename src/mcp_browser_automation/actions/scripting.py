"""Script evaluation in the page context."""

import json
import contextlib

from ..constants import DEFAULT_SCRIPT_TIMEOUT_SECS
from ..errors import ScriptEvaluationError


OBJECT_GROUP = "mcp-browser-automation-evaluate"

SETTLE_WITHIN_JS = """
function (ms) {
  let timer;
  const expired = new Promise((_, reject) => {
    timer = setTimeout(() => reject(new Error(`Script did not finish within ${ms}ms`)), ms);
  });
  return Promise.race([Promise.resolve(this), expired]).finally(() => clearTimeout(timer));
}
"""
"""Awaits the receiver if it is a promise, bounded by a timeout, and returns it."""


def _raise_for_exception(response: dict) -> None:
    details = response.get("exceptionDetails")
    if not details:
        return
    exception = details.get("exception") or {}
    message = exception.get("description") or exception.get("value") or details.get("text") or "unknown error"
    raise ScriptEvaluationError(f"Script error: {message}")


def _remote_value(remote: dict):
    # Values JSON cannot carry (NaN, Infinity, -0, bigint) come back as their literal text
    if "unserializableValue" in remote:
        return remote["unserializableValue"]
    if remote.get("type") == "undefined":
        return None
    return remote.get("value")


def evaluate_script(driver, script: str, timeout: float = DEFAULT_SCRIPT_TIMEOUT_SECS):
    """
    Evaluate `script` in the page's global scope and return its (awaited) value.

    Runs through the DevTools `Runtime` domain rather than WebDriver's script
    execution, so a page Content-Security-Policy that forbids `eval` does not
    apply. A returned promise is awaited for at most `timeout` seconds.

    Raises:
        ScriptEvaluationError: if the script throws, its promise rejects, or it
            does not settle in time.
    """
    timeout_ms = max(int(timeout * 1000), 1)
    try:
        response = driver.execute_cdp_cmd("Runtime.evaluate", {
            "expression": script,
            "objectGroup": OBJECT_GROUP,
            "returnByValue": False,
            "awaitPromise": False,
            "timeout": timeout_ms,
        }) or {}
        _raise_for_exception(response)

        remote = response.get("result") or {}
        if "objectId" not in remote:
            return _remote_value(remote)

        settled = driver.execute_cdp_cmd("Runtime.callFunctionOn", {
            "functionDeclaration": SETTLE_WITHIN_JS,
            "objectId": remote["objectId"],
            "arguments": [{"value": timeout_ms}],
            "awaitPromise": True,
            "returnByValue": True,
        }) or {}
        _raise_for_exception(settled)
        return _remote_value(settled.get("result") or {})
    finally:
        with contextlib.suppress(Exception):
            driver.execute_cdp_cmd("Runtime.releaseObjectGroup", {"objectGroup": OBJECT_GROUP})


def serialize_result(value) -> str:
    """
    Encode an evaluation result as JSON text.

    Values JSON cannot represent are encoded via repr().
    """
    return json.dumps(value, indent=2, ensure_ascii=False, default=repr)


__all__ = [
    "SETTLE_WITHIN_JS",
    "evaluate_script",
    "serialize_result",
]
