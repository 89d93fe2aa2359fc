"""
Single-session browser automation over the Model Context Protocol.

One headless Chrome browser and one page are created on the first tool call,
shared by every later call, and closed when the process exits. Tools:

    navigate      load a URL and wait for the network to settle
    screenshot    capture the page (full page by default) as a PNG
    click         click an element by CSS selector
    fill          set the value of an input by CSS selector
    evaluate      run JavaScript in the page, result returned as JSON
    get_content   return the page's full HTML

Calls are served one at a time. Concurrent calls queue behind the running one
(or are rejected as busy with MCP_BROWSER_BUSY_POLICY=reject).
"""

from .catalog import ToolCatalog, ToolDescriptor
from .dispatcher import Dispatcher
from .results import ImageItem, InvocationResponse, TextItem
from .session import Session, SessionManager

__all__ = [
    "ToolCatalog",
    "ToolDescriptor",
    "Dispatcher",
    "ImageItem",
    "InvocationResponse",
    "TextItem",
    "Session",
    "SessionManager",
]
