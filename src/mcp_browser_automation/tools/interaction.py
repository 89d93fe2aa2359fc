"""Element interaction tools."""

from ..actions.elements import click_element, fill_element
from ..catalog import ToolDescriptor
from ..decorators import handler_envelope
from ..results import Success, TextItem


CLICK = ToolDescriptor(
    name="click",
    description="Click the first visible element matching a CSS selector.",
    input_schema={
        "type": "object",
        "properties": {
            "selector": {"type": "string", "description": "CSS selector of the element to click"},
        },
        "required": ["selector"],
    },
)

FILL = ToolDescriptor(
    name="fill",
    description="Replace the value of an input field matching a CSS selector.",
    input_schema={
        "type": "object",
        "properties": {
            "selector": {"type": "string", "description": "CSS selector of the input field"},
            "value": {"type": "string", "description": "Value to enter"},
        },
        "required": ["selector", "value"],
    },
)


@handler_envelope
def click(session, arguments):
    selector = arguments["selector"]
    session.focus_page()
    click_element(session.driver, selector, timeout=session.config.get("element_timeout", 30))
    return Success(content=[TextItem(text=f"Clicked: {selector}")])


@handler_envelope
def fill(session, arguments):
    selector = arguments["selector"]
    value = arguments["value"]
    session.focus_page()
    fill_element(session.driver, selector, value, timeout=session.config.get("element_timeout", 30))
    return Success(content=[TextItem(text=f"Filled {selector} with: {value}")])


__all__ = ["CLICK", "FILL", "click", "fill"]
