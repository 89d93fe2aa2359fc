# mcp_browser_automation/tools/__init__.py
"""
Operation handlers and their descriptors.

Every handler has the signature `(session, arguments) -> ToolResult` and is
wrapped by `handler_envelope`, so failures come back as `Failure` results
instead of exceptions. Adding a tool means appending one (descriptor, handler)
pair to TOOLS.
"""

from ..catalog import ToolCatalog

from .navigation import NAVIGATE, navigate
from .screenshots import SCREENSHOT, screenshot
from .interaction import CLICK, FILL, click, fill
from .extraction import EVALUATE, GET_CONTENT, evaluate, get_content

TOOLS = (
    (NAVIGATE, navigate),
    (SCREENSHOT, screenshot),
    (CLICK, click),
    (FILL, fill),
    (EVALUATE, evaluate),
    (GET_CONTENT, get_content),
)


def build_catalog(tools=TOOLS) -> ToolCatalog:
    return ToolCatalog(descriptor for descriptor, _ in tools)


def build_handlers(tools=TOOLS) -> dict:
    return {descriptor.name: handler for descriptor, handler in tools}


__all__ = [
    "TOOLS",
    "build_catalog",
    "build_handlers",
    # Handlers
    "navigate",
    "screenshot",
    "click",
    "fill",
    "evaluate",
    "get_content",
]
