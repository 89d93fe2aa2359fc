# mcp_browser_automation/decorators/envelope.py

import json
import asyncio
import inspect
import functools
from typing import Any, Callable

from ..errors import BrowserAutomationError, ErrorKind, describe_exception
from ..results import Failure, ImageItem, Success, TextItem
from ..utils.diagnostics import collect_diagnostics

import logging
logger = logging.getLogger(__name__)


__all__ = [
    "handler_envelope",
]


def _normalize(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    try:
        return json.dumps(value, ensure_ascii=False, default=repr)
    except (TypeError, ValueError):
        return str(value)


def _to_result(value: Any):
    if isinstance(value, (Success, Failure)):
        return value
    if isinstance(value, (TextItem, ImageItem)):
        return Success(content=[value])
    if isinstance(value, list) and all(isinstance(v, (TextItem, ImageItem)) for v in value):
        return Success(content=list(value))
    return Success(content=[TextItem(text=_normalize(value))])


def _failure(err: Exception, session) -> Failure:
    kind = err.kind if isinstance(err, BrowserAutomationError) else ErrorKind.AUTOMATION_FAILURE
    if logger.isEnabledFor(logging.DEBUG):
        driver = getattr(session, "driver", None)
        config = getattr(session, "config", None)
        logger.debug(collect_diagnostics(driver, err, config))
    return Failure(kind=kind, message=describe_exception(err))


def handler_envelope(func: Callable):
    """
    Decorator for operation handlers `(session, arguments) -> result`:
      - Works with both async and sync callables; the wrapper is always async.
      - On success: returns a `Success`, wrapping plain values in a text item
        (json.dumps for non-strings).
      - On error: returns a `Failure` whose kind comes from the exception
        (`AUTOMATION_FAILURE` for anything not raised by this package).
    """

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def wrapper(session, arguments):
            try:
                result = await func(session, arguments)
            except asyncio.CancelledError:
                # Preserve cooperative cancellation semantics
                raise
            except Exception as e:
                logger.warning(f"{func.__name__} failed: {e.__class__.__name__}: {describe_exception(e)}")
                return _failure(e, session)
            return _to_result(result)
        return wrapper

    @functools.wraps(func)
    async def sync_wrapper(session, arguments):
        try:
            result = await asyncio.to_thread(func, session, arguments)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"{func.__name__} failed: {e.__class__.__name__}: {describe_exception(e)}")
            return _failure(e, session)
        return _to_result(result)
    return sync_wrapper
