"""
Jira Data Center service façade.

Maps tool-level parameters onto REST requests and reports every failure as
an ``ApiOperationError`` with an operation-specific context message.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from jiradc.client import (
    ClientConfig,
    CommentBody,
    IssueService,
    IssueUpdate,
    JiraApiClient,
    SearchRequest,
    SearchService,
)
from jiradc.config.settings import validate_config
from jiradc.tools.shared.errors import handle_api_operation

logger = logging.getLogger(__name__)

API_VERSION = "2"
DEFAULT_MAX_RESULTS = 10


def merge_issue_fields(
    standard_fields: Mapping[str, Any],
    custom_fields: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Merge *custom_fields* over *standard_fields* (shallow).

    Custom fields win on key collision, ``project`` and ``issuetype``
    included.
    """
    fields = dict(standard_fields)
    if custom_fields:
        fields.update(custom_fields)
    return fields


class JiraService:
    """Five Jira operations over one immutable ``ClientConfig``."""

    def __init__(
        self,
        host: str,
        token: str,
        full_base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        base = full_base_url if full_base_url is not None else f"https://{host}/rest"
        self.config = ClientConfig(base=base, token=token, version=API_VERSION)
        api = JiraApiClient(self.config, transport=transport)
        self._issues = IssueService(api)
        self._search = SearchService(api)
        logger.info("JiraService initialized for %s", base)

    async def search_issues(
        self,
        jql: str,
        start_at: Optional[int] = None,
        expand: Optional[List[str]] = None,
        max_results: Optional[int] = DEFAULT_MAX_RESULTS,
    ) -> Dict[str, Any]:
        if max_results is None:
            max_results = DEFAULT_MAX_RESULTS
        return await handle_api_operation(
            lambda: self._search.search_using_search_request(
                SearchRequest(
                    jql=jql, max_results=max_results, expand=expand, start_at=start_at
                )
            ),
            "Error searching issues",
        )

    async def get_issue(self, issue_key: str, expand: Optional[str] = None) -> Dict[str, Any]:
        return await handle_api_operation(
            lambda: self._issues.get_issue(issue_key, expand), "Error getting issue"
        )

    async def get_issue_comments(
        self, issue_key: str, expand: Optional[str] = None
    ) -> Dict[str, Any]:
        return await handle_api_operation(
            lambda: self._issues.get_comments(issue_key, expand),
            "Error getting issue comments",
        )

    async def post_issue_comment(self, issue_key: str, comment: str) -> Dict[str, Any]:
        """Add *comment* as-is; the caller supplies Jira wiki markup."""
        return await handle_api_operation(
            lambda: self._issues.add_comment(issue_key, None, CommentBody(body=comment)),
            "Error posting issue comment",
        )

    async def create_issue(
        self,
        project_key: str,
        summary: str,
        description: str,
        issue_type_id: str,
        custom_fields: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        async def _create():
            standard_fields = {
                "project": {"key": project_key},
                "summary": summary,
                "description": description,
                "issuetype": {"id": issue_type_id},
            }
            fields = merge_issue_fields(standard_fields, custom_fields)
            return await self._issues.create_issue(True, IssueUpdate(fields=fields))

        return await handle_api_operation(_create, "Error creating issue")

    @staticmethod
    def validate_config(environ: Optional[Mapping[str, str]] = None) -> List[str]:
        """See ``jiradc.config.settings.validate_config``."""
        return validate_config(environ)
