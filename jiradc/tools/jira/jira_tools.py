"""
Agent tools for Jira Data Center issue management.

Provides tools to search, inspect, comment on, and create Jira issues.
All tools are async and return ``{"status": "success", ...}`` or
``{"status": "error", "message": ...}`` per project convention.
"""

import logging
import traceback
from typing import Any, Dict, List, Optional

from google.adk.tools import FunctionTool

from jiradc.service import DEFAULT_MAX_RESULTS
from jiradc.tools.shared.errors import truncate_error

from .jira_client import get_jira_service

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _service_or_error():
    """Return (service, None) or (None, error_dict)."""
    service = get_jira_service()
    if service is None:
        return None, {
            "status": "error",
            "message": (
                "Jira is not configured. Set JIRA_API_TOKEN and either "
                "JIRA_HOST or JIRA_API_BASE_PATH environment variables."
            ),
        }
    return service, None


def _error(e: Exception) -> Dict[str, Any]:
    logger.error(str(e))
    logger.debug(traceback.format_exc())
    return {"status": "error", "message": truncate_error(str(e))}


# ---------------------------------------------------------------------------
# Tool functions
# ---------------------------------------------------------------------------

async def jira_search_issues(
    jql: str,
    max_results: Optional[int] = None,
    start_at: Optional[int] = None,
    expand: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Search for JIRA issues using JQL.

    Args:
        jql: A JQL query string (e.g. 'project = PROJ AND status = "To Do"').
        max_results: Maximum number of results to return (default 10).
        start_at: Index of the first result to return.
        expand: Fields to expand.

    Returns:
        On success: {"status": "success", "issues": [...], "total": N, "start_at": N, "max_results": N}
        On failure: {"status": "error", "message": "..."}
    """
    service, err = _service_or_error()
    if err:
        return err

    try:
        if max_results is None:
            max_results = DEFAULT_MAX_RESULTS
        logger.debug("jira_search_issues JQL: %s", jql)
        result = await service.search_issues(jql, start_at, expand, max_results)
        issues = result.get("issues", [])
        return {
            "status": "success",
            "issues": issues,
            "total": result.get("total", len(issues)),
            "start_at": result.get("startAt", start_at or 0),
            "max_results": result.get("maxResults", max_results),
        }
    except Exception as e:
        return _error(e)


async def jira_get_issue(issue_key: str, expand: Optional[str] = None) -> Dict[str, Any]:
    """
    Get details of a JIRA issue by its key.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        expand: Comma separated fields to expand.

    Returns:
        On success: {"status": "success", "issue": {...}}
        On failure: {"status": "error", "message": "..."}
    """
    service, err = _service_or_error()
    if err:
        return err

    try:
        issue = await service.get_issue(issue_key, expand)
        return {"status": "success", "issue": issue}
    except Exception as e:
        return _error(e)


async def jira_get_issue_comments(
    issue_key: str, expand: Optional[str] = None
) -> Dict[str, Any]:
    """
    Get comments of a JIRA issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        expand: Comma separated fields to expand.

    Returns:
        On success: {"status": "success", "issue_key": "...", "comments": [...], "total": N}
        On failure: {"status": "error", "message": "..."}
    """
    service, err = _service_or_error()
    if err:
        return err

    try:
        result = await service.get_issue_comments(issue_key, expand)
        comments = (result or {}).get("comments", [])
        return {
            "status": "success",
            "issue_key": issue_key,
            "comments": comments,
            "total": (result or {}).get("total", len(comments)),
        }
    except Exception as e:
        return _error(e)


async def jira_post_issue_comment(issue_key: str, comment: str) -> Dict[str, Any]:
    """
    Post a comment to a JIRA issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        comment: Comment text in JIRA Wiki Markup (Data Center edition).

    Returns:
        On success: {"status": "success", "issue_key": "...", "comment": {...}}
        On failure: {"status": "error", "message": "..."}
    """
    service, err = _service_or_error()
    if err:
        return err

    try:
        result = await service.post_issue_comment(issue_key, comment)
        logger.info("Added comment to %s", issue_key)
        return {"status": "success", "issue_key": issue_key, "comment": result}
    except Exception as e:
        return _error(e)


async def jira_create_issue(
    project_key: str,
    summary: str,
    description: str,
    issue_type_id: str,
    custom_fields: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a new JIRA issue.

    Args:
        project_key: The project key (e.g. "PROJ").
        summary: Issue summary.
        description: Issue description in JIRA Wiki Markup (Data Center edition).
        issue_type_id: Issue type id (e.g. id of Task, Bug, Story) for this
            JIRA installation.
        custom_fields: Optional extra fields, e.g.
            {"customfield_10001": "value", "priority": {"id": "1"}}.
            They override standard fields with the same name.

    Returns:
        On success: {"status": "success", "issue": {"id": "...", "key": "...", "self": "..."}}
        On failure: {"status": "error", "message": "..."}
    """
    service, err = _service_or_error()
    if err:
        return err

    try:
        created = await service.create_issue(
            project_key, summary, description, issue_type_id, custom_fields
        )
        logger.info("Created Jira issue %s", (created or {}).get("key", "?"))
        return {"status": "success", "issue": created}
    except Exception as e:
        return _error(e)


# ---------------------------------------------------------------------------
# Wrap as ADK FunctionTools
# ---------------------------------------------------------------------------

jira_search_issues_tool = FunctionTool(jira_search_issues)
jira_get_issue_tool = FunctionTool(jira_get_issue)
jira_get_issue_comments_tool = FunctionTool(jira_get_issue_comments)
jira_post_issue_comment_tool = FunctionTool(jira_post_issue_comment)
jira_create_issue_tool = FunctionTool(jira_create_issue)

JIRA_TOOLS = [
    jira_search_issues_tool,
    jira_get_issue_tool,
    jira_get_issue_comments_tool,
    jira_post_issue_comment_tool,
    jira_create_issue_tool,
]
