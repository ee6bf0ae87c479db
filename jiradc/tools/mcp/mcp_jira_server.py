"""
MCP Jira Server

Implements a standalone MCP server exposing the Jira tools over stdio.
Tool input schemas are generated from the pydantic parameter models, and
call arguments are validated against the same models before dispatch.

Usage:
    python -m jiradc
"""

import asyncio
import json
import logging
from contextlib import AsyncExitStack
from typing import Any, Awaitable, Callable, Dict, List, NamedTuple, Type

import mcp.server.stdio
from mcp import types as mcp_types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from pydantic import BaseModel, ValidationError

from jiradc import __version__
from jiradc.tools.jira.jira_tools import (
    jira_create_issue,
    jira_get_issue,
    jira_get_issue_comments,
    jira_post_issue_comment,
    jira_search_issues,
)
from jiradc.tools.jira.schemas import JIRA_TOOL_SCHEMAS, input_schema

logger = logging.getLogger(__name__)

SERVER_NAME = "jira-dc-mcp-server"


class ToolSpec(NamedTuple):
    description: str
    params: Type[BaseModel]
    handler: Callable[..., Awaitable[Dict[str, Any]]]


TOOL_SPECS: Dict[str, ToolSpec] = {
    "jira_search_issues": ToolSpec(
        "Search for JIRA issues using JQL",
        JIRA_TOOL_SCHEMAS["search_issues"],
        jira_search_issues,
    ),
    "jira_get_issue": ToolSpec(
        "Get details of a JIRA issue by its key",
        JIRA_TOOL_SCHEMAS["get_issue"],
        jira_get_issue,
    ),
    "jira_get_issue_comments": ToolSpec(
        "Get comments of a JIRA issue",
        JIRA_TOOL_SCHEMAS["get_issue_comments"],
        jira_get_issue_comments,
    ),
    "jira_post_issue_comment": ToolSpec(
        "Post a comment to a JIRA issue",
        JIRA_TOOL_SCHEMAS["post_issue_comment"],
        jira_post_issue_comment,
    ),
    "jira_create_issue": ToolSpec(
        "Create a new JIRA issue",
        JIRA_TOOL_SCHEMAS["create_issue"],
        jira_create_issue,
    ),
}


def build_tool_list() -> List[mcp_types.Tool]:
    """Describe every Jira tool for a ``list_tools`` request."""
    return [
        mcp_types.Tool(
            name=name,
            description=spec.description,
            inputSchema=input_schema(spec.params),
        )
        for name, spec in TOOL_SPECS.items()
    ]


def _text(payload: Any) -> List[mcp_types.TextContent]:
    return [mcp_types.TextContent(type="text", text=json.dumps(payload, indent=2))]


async def dispatch_tool(name: str, arguments: Dict[str, Any]) -> mcp_types.CallToolResult:
    """Validate *arguments* for tool *name*, run it and wrap the result."""
    spec = TOOL_SPECS.get(name)
    if spec is None:
        logger.warning(f"Unknown tool: {name}")
        return mcp_types.CallToolResult(
            content=_text({"status": "error", "message": f"Tool '{name}' not implemented"}),
            isError=True,
        )

    try:
        params = spec.params.model_validate(arguments or {})
    except ValidationError as e:
        logger.warning(f"Invalid arguments for '{name}': {e}")
        return mcp_types.CallToolResult(
            content=_text({"status": "error", "message": f"INVALID_ARGUMENT: {e}"}),
            isError=True,
        )

    result = await spec.handler(**params.model_dump())
    return mcp_types.CallToolResult(
        content=_text(result), isError=result.get("status") != "success"
    )


def setup_mcp_server() -> Server:
    """Create the MCP server with the Jira tool handlers registered."""
    app = Server(SERVER_NAME)

    @app.list_tools()
    async def list_tools() -> List[mcp_types.Tool]:
        """MCP handler to list available tools."""
        tools = build_tool_list()
        logger.info(f"MCP Server: Advertising {len(tools)} tools")
        return tools

    @app.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> mcp_types.CallToolResult:
        """MCP handler to execute a tool call."""
        logger.info(f"MCP Server: Received call_tool request for '{name}'")
        return await dispatch_tool(name, arguments)

    return app


async def run_server_async() -> None:
    """Serve MCP over stdio until the client disconnects."""
    app = setup_mcp_server()

    async with AsyncExitStack() as exit_stack:
        read_stream, write_stream = await exit_stack.enter_async_context(
            mcp.server.stdio.stdio_server()
        )

        logger.info("MCP Server starting...")
        init_options = InitializationOptions(
            server_name=app.name,
            server_version=__version__,
            capabilities=app.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )
        await app.run(read_stream, write_stream, init_options)


def start_server() -> None:
    """Run the MCP server, blocking until it exits."""
    try:
        asyncio.run(run_server_async())
    except KeyboardInterrupt:
        logger.info("MCP Server interrupted by user")
    finally:
        logger.info("MCP Server exited")
