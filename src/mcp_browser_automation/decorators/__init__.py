# mcp_browser_automation/decorators/__init__.py

from .envelope import handler_envelope

__all__ = [
    "handler_envelope",
]
