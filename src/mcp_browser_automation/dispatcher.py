"""
Request Dispatcher: resolves requests against the catalog and runs handlers.

Every outcome, including unknown tools, bad arguments, browser startup
failures and automation failures, comes back as an `InvocationResponse`.
Nothing short of task cancellation escapes `handle_invoke`.
"""

import asyncio
from typing import Callable, Dict, List, Optional

from .catalog import ToolCatalog, ToolDescriptor
from .constants import BUSY_POLICIES, BUSY_POLICY_QUEUE, BUSY_POLICY_REJECT
from .errors import BrowserStartupError, ErrorKind, InvalidArgumentsError, describe_exception
from .results import Failure, InvocationResponse, Success, ToolResult
from .session import SessionManager
from .utils.validation import validate_arguments

import logging
logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Routes list and invoke requests.

    Args:
        catalog: The tool catalog; the source of truth for names and schemas.
        handlers: Mapping of tool name to async handler `(session, arguments)`.
        sessions: Owner of the shared browser session.
        busy_policy: 'queue' waits for a running invocation to finish;
            'reject' answers with a busy error instead.
    """

    def __init__(
        self,
        catalog: ToolCatalog,
        handlers: Dict[str, Callable],
        sessions: SessionManager,
        busy_policy: str = BUSY_POLICY_QUEUE,
    ):
        missing = [name for name in catalog.names() if name not in handlers]
        extra = [name for name in handlers if name not in catalog]
        if missing or extra:
            raise ValueError(
                f"Catalog and handlers disagree (no handler: {missing}, not in catalog: {extra})"
            )
        if busy_policy not in BUSY_POLICIES:
            raise ValueError(f"Unknown busy policy: {busy_policy!r}")

        self.catalog = catalog
        self.handlers = dict(handlers)
        self.sessions = sessions
        self.busy_policy = busy_policy
        self.invocations = 0
        self._lock: Optional[asyncio.Lock] = None

    def _get_lock(self) -> asyncio.Lock:
        # Created lazily so the lock binds to the running event loop
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def handle_list(self) -> List[ToolDescriptor]:
        return self.catalog.list()

    async def handle_invoke(self, name: str, arguments: Optional[dict] = None) -> InvocationResponse:
        self.invocations += 1

        descriptor = self.catalog.get(name)
        if descriptor is None:
            logger.warning(f"Rejected call to unknown tool {name!r}")
            return InvocationResponse.error(ErrorKind.UNKNOWN_OPERATION, f"Unknown tool: {name}")

        try:
            arguments = validate_arguments(descriptor.input_schema, arguments)
        except InvalidArgumentsError as e:
            logger.warning(f"{name}: {e}")
            return InvocationResponse.error(ErrorKind.INVALID_ARGUMENTS, str(e))

        lock = self._get_lock()
        if self.busy_policy == BUSY_POLICY_REJECT and lock.locked():
            logger.info(f"Rejected {name}: another invocation is running")
            return InvocationResponse.error(
                ErrorKind.BUSY,
                "Browser is busy with another request; retry when it has finished.",
            )

        async with lock:
            result = await self._run_to_completion(name, arguments)
        return self.to_response(result)

    async def _run_to_completion(self, name: str, arguments: dict) -> ToolResult:
        """
        Run the invocation, keeping the caller's lock held until it has finished.

        Handler work happens in worker threads that cannot be interrupted, so a
        cancelled caller still waits for the page to be free before the
        cancellation propagates.
        """
        task = asyncio.ensure_future(self._run(name, arguments))
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            logger.info(f"{name} cancelled; waiting for the browser action to finish")
            while not task.done():
                try:
                    await asyncio.wait({task})
                except asyncio.CancelledError:
                    continue
            if not task.cancelled() and task.exception() is not None:
                logger.warning(f"{name} failed after cancellation: {describe_exception(task.exception())}")
            raise

    async def _run(self, name: str, arguments: dict) -> ToolResult:
        try:
            session = await asyncio.to_thread(self.sessions.acquire)
        except BrowserStartupError as e:
            return Failure(kind=ErrorKind.STARTUP_FAILURE, message=describe_exception(e))

        logger.debug(f"Invoking {name} on {session.session_id}")
        try:
            return await self.handlers[name](session, arguments)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"{name} raised {e.__class__.__name__}: {describe_exception(e)}")
            return Failure(kind=ErrorKind.AUTOMATION_FAILURE, message=describe_exception(e))

    @staticmethod
    def to_response(result: ToolResult) -> InvocationResponse:
        """Map a handler result onto the response envelope."""
        if isinstance(result, Success):
            return InvocationResponse(content=list(result.content), is_error=False)
        if isinstance(result, Failure):
            return InvocationResponse.error(result.kind, result.message)
        logger.error(f"Handler returned {type(result).__name__}, expected Success or Failure")
        return InvocationResponse.error(
            ErrorKind.AUTOMATION_FAILURE, f"Internal error: unexpected handler result {type(result).__name__}"
        )


__all__ = ["Dispatcher"]
