"""
Resource services for the Jira REST API.

``IssueService`` and ``SearchService`` mirror the resource groups of Jira's
REST reference; each method maps one endpoint and returns the decoded JSON.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from .api_client import JiraApiClient
from .models import CommentBody, IssueUpdate, SearchRequest


def _issue_path(issue_key: str, suffix: str = "") -> str:
    return f"/issue/{quote(issue_key, safe='')}{suffix}"


class IssueService:
    """Endpoints under ``/api/2/issue``."""

    def __init__(self, api: JiraApiClient):
        self._api = api

    async def get_issue(self, issue_key: str, expand: Optional[str] = None) -> Dict[str, Any]:
        """``GET /issue/{issueIdOrKey}``."""
        return await self._api.request("GET", _issue_path(issue_key), params={"expand": expand})

    async def get_comments(self, issue_key: str, expand: Optional[str] = None) -> Dict[str, Any]:
        """``GET /issue/{issueIdOrKey}/comment``."""
        return await self._api.request(
            "GET", _issue_path(issue_key, "/comment"), params={"expand": expand}
        )

    async def add_comment(
        self,
        issue_key: str,
        expand: Optional[str],
        comment: CommentBody,
    ) -> Dict[str, Any]:
        """``POST /issue/{issueIdOrKey}/comment``."""
        return await self._api.request(
            "POST",
            _issue_path(issue_key, "/comment"),
            params={"expand": expand},
            json_body=comment.to_json(),
        )

    async def create_issue(self, update_history: bool, issue: IssueUpdate) -> Dict[str, Any]:
        """``POST /issue``; ``update_history`` adds the project to the user's recent list."""
        return await self._api.request(
            "POST",
            "/issue",
            params={"updateHistory": "true" if update_history else "false"},
            json_body=issue.to_json(),
        )


class SearchService:
    """Endpoints under ``/api/2/search``."""

    def __init__(self, api: JiraApiClient):
        self._api = api

    async def search_using_search_request(self, search: SearchRequest) -> Dict[str, Any]:
        """``POST /search`` with the query in the request body."""
        return await self._api.request("POST", "/search", json_body=search.to_json())
