"""Screenshot capture tool."""

from ..actions.screenshots import capture_screenshot, save_screenshot, set_viewport
from ..catalog import ToolDescriptor
from ..decorators import handler_envelope
from ..results import ImageItem, Success, TextItem
from ..utils.images import downscale_png

import logging
logger = logging.getLogger(__name__)


SCREENSHOT = ToolDescriptor(
    name="screenshot",
    description=(
        "Take a PNG screenshot of the current page. Captures the whole "
        "scrollable page unless fullPage is false. A width or height resizes the "
        "browser window, and the new size stays in effect for later calls."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "name": {"type": "string", "description": "Name for the screenshot"},
            "fullPage": {
                "type": "boolean",
                "description": "Capture the full scrollable page instead of the viewport",
                "default": True,
            },
            "width": {
                "type": "integer",
                "minimum": 1,
                "description": "Resize the browser window to this width first",
            },
            "height": {
                "type": "integer",
                "minimum": 1,
                "description": "Resize the browser window to this height first",
            },
        },
        "required": ["name"],
    },
)


@handler_envelope
def screenshot(session, arguments):
    """
    Returns exactly one image item followed by one text item.

    Supplying only one of width/height keeps the configured size for the other.
    """
    name = arguments["name"]
    full_page = arguments.get("fullPage", True)
    config = session.config
    driver = session.driver
    session.focus_page()

    width, height = arguments.get("width"), arguments.get("height")
    if width is not None or height is not None:
        set_viewport(
            driver,
            width if width is not None else config.get("window_width", 1280),
            height if height is not None else config.get("window_height", 800),
        )

    data = capture_screenshot(driver, full_page=full_page)

    message = f"Screenshot '{name}' taken"
    if config.get("screenshot_dir"):
        path = save_screenshot(data, config["screenshot_dir"], name)
        message += f" (saved to {path})"
        logger.info(f"Screenshot '{name}' saved to {path}")

    data = downscale_png(data, config.get("screenshot_max_width") or 0)
    return Success(content=[ImageItem(data=data, mime_type="image/png"), TextItem(text=message)])


__all__ = ["SCREENSHOT", "screenshot"]
