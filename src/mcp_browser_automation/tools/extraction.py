"""Page content and script evaluation tools."""

from ..actions.screenshots import get_page_html
from ..actions.scripting import evaluate_script, serialize_result
from ..catalog import ToolDescriptor
from ..decorators import handler_envelope
from ..results import Success, TextItem


EVALUATE = ToolDescriptor(
    name="evaluate",
    description=(
        "Execute JavaScript in the page and return its result as JSON. "
        "Promises are awaited."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "script": {"type": "string", "description": "JavaScript expression or statements to evaluate"},
        },
        "required": ["script"],
    },
)

GET_CONTENT = ToolDescriptor(
    name="get_content",
    description="Return the full HTML markup of the current page.",
    input_schema={"type": "object", "properties": {}},
)


@handler_envelope
def evaluate(session, arguments):
    session.focus_page()
    value = evaluate_script(
        session.driver,
        arguments["script"],
        timeout=session.config.get("script_timeout", 30),
    )
    return Success(content=[TextItem(text=f"Execution result:\n{serialize_result(value)}")])


@handler_envelope
def get_content(session, arguments):
    session.focus_page()
    return Success(content=[TextItem(text=get_page_html(session.driver))])


__all__ = ["EVALUATE", "GET_CONTENT", "evaluate", "get_content"]
