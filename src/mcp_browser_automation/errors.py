"""Error taxonomy shared by the dispatcher, the session manager and the handlers."""

import enum


class ErrorKind(str, enum.Enum):
    """Why an invocation produced an error response."""

    UNKNOWN_OPERATION = "unknown_operation"
    INVALID_ARGUMENTS = "invalid_arguments"
    STARTUP_FAILURE = "startup_failure"
    AUTOMATION_FAILURE = "automation_failure"
    BUSY = "busy"


class BrowserAutomationError(Exception):
    """Base class for errors raised by this package."""

    kind = ErrorKind.AUTOMATION_FAILURE


class BrowserStartupError(BrowserAutomationError):
    """The browser session could not be created."""

    kind = ErrorKind.STARTUP_FAILURE


class InvalidArgumentsError(BrowserAutomationError):
    """Tool arguments do not match the tool's input schema."""

    kind = ErrorKind.INVALID_ARGUMENTS


class AutomationError(BrowserAutomationError):
    """A browser action failed."""


class ElementNotFoundError(AutomationError):
    """No visible element matched a selector before the timeout."""

    def __init__(self, selector: str, timeout: float):
        super().__init__(f"No visible element matched selector '{selector}' within {timeout:g}s")
        self.selector = selector
        self.timeout = timeout


class ScriptEvaluationError(AutomationError):
    """A script evaluated in the page threw or rejected."""


def describe_exception(exc: BaseException) -> str:
    """
    Return a non-empty, human-readable message for an exception.

    Selenium exceptions carry the driver's message in `.msg`; their `str()`
    adds a "Message:" prefix and the remote stack trace, which is noise for a
    caller. Exceptions without any message fall back to their class name.
    """
    if hasattr(exc, "msg"):
        # Selenium renders a missing message as "Message: None"
        message = exc.msg or ""
    else:
        message = str(exc)
    message = str(message).strip()
    if message.startswith("Message:"):
        message = message[len("Message:"):].strip()
    message = message.split("\nStacktrace:")[0].strip()
    if not message:
        return exc.__class__.__name__
    return message


__all__ = [
    "ErrorKind",
    "BrowserAutomationError",
    "BrowserStartupError",
    "InvalidArgumentsError",
    "AutomationError",
    "ElementNotFoundError",
    "ScriptEvaluationError",
    "describe_exception",
]
