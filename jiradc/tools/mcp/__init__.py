"""
MCP server exposing the Jira tools.
"""

from .mcp_jira_server import TOOL_SPECS, build_tool_list, dispatch_tool, setup_mcp_server, start_server

__all__ = ["TOOL_SPECS", "build_tool_list", "dispatch_tool", "setup_mcp_server", "start_server"]
