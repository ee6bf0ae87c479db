"""
Jira Data Center tools.

This package provides tools for searching, inspecting, commenting on, and
creating Jira issues.
"""

from .jira_client import get_jira_service, reset_jira_service
from .jira_tools import (
    JIRA_TOOLS,
    jira_create_issue_tool,
    jira_get_issue_comments_tool,
    jira_get_issue_tool,
    jira_post_issue_comment_tool,
    jira_search_issues_tool,
)
from .schemas import JIRA_TOOL_SCHEMAS

__all__ = [
    "jira_search_issues_tool",
    "jira_get_issue_tool",
    "jira_get_issue_comments_tool",
    "jira_post_issue_comment_tool",
    "jira_create_issue_tool",
    "JIRA_TOOLS",
    "JIRA_TOOL_SCHEMAS",
    "get_jira_service",
    "reset_jira_service",
]
