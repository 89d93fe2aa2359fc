"""Navigation tool."""

from ..actions.navigation import navigate_to_url
from ..catalog import ToolDescriptor
from ..decorators import handler_envelope
from ..results import Success, TextItem

import logging
logger = logging.getLogger(__name__)


NAVIGATE = ToolDescriptor(
    name="navigate",
    description="Navigate the browser to a URL and wait until network activity settles.",
    input_schema={
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "Absolute URL to load, e.g. https://example.com"},
        },
        "required": ["url"],
    },
)


@handler_envelope
def navigate(session, arguments):
    url = arguments["url"]
    config = session.config
    session.focus_page()
    idle = navigate_to_url(
        session.driver,
        url,
        timeout=config.get("page_load_timeout", 30),
        idle_ms=config.get("network_idle_ms", 500),
    )
    if not idle:
        logger.info(f"Navigated to {url} before network went idle")
    return Success(content=[TextItem(text=f"Navigated to {url}")])


__all__ = ["NAVIGATE", "navigate"]
