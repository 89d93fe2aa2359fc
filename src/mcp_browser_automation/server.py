"""MCP stdio transport: exposes the dispatcher as list-tools and call-tool handlers."""

from typing import List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .constants import SERVER_NAME, SERVER_VERSION
from .dispatcher import Dispatcher
from .results import ImageItem, InvocationResponse, TextItem

import logging
logger = logging.getLogger(__name__)


def to_tool(descriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.schema(),
    )


def to_content(item):
    if isinstance(item, ImageItem):
        return types.ImageContent(type="image", data=item.data, mimeType=item.mime_type)
    if isinstance(item, TextItem):
        return types.TextContent(type="text", text=item.text)
    raise TypeError(f"Unsupported content item: {item!r}")


def to_call_tool_result(response: InvocationResponse) -> types.CallToolResult:
    return types.CallToolResult(
        content=[to_content(item) for item in response.content],
        isError=response.is_error,
    )


def build_server(dispatcher: Dispatcher, name: str = SERVER_NAME) -> Server:
    """Create an MCP server whose tool requests are answered by `dispatcher`."""
    server = Server(name, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [to_tool(d) for d in dispatcher.handle_list()]

    # The dispatcher validates arguments itself and reports problems as error responses
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict) -> types.CallToolResult:
        response = await dispatcher.handle_invoke(name, arguments or {})
        return to_call_tool_result(response)

    return server


async def serve(dispatcher: Dispatcher) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"{SERVER_NAME} {SERVER_VERSION} listening on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = [
    "build_server",
    "serve",
    "to_tool",
    "to_content",
    "to_call_tool_result",
]
