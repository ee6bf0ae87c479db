"""Unit tests for the Jira agent tools."""

import asyncio
from unittest.mock import AsyncMock, patch

from jiradc.tools.jira import jira_client
from jiradc.tools.jira.jira_tools import (
    JIRA_TOOLS,
    jira_create_issue,
    jira_get_issue,
    jira_get_issue_comments,
    jira_post_issue_comment,
    jira_search_issues,
)
from jiradc.tools.shared.errors import ApiOperationError

# All tools use get_jira_service(), so we patch it at module level
_PATCH_SERVICE = "jiradc.tools.jira.jira_tools.get_jira_service"


def _mock_service(**method_returns):
    """Build an AsyncMock JiraService with given return values."""
    service = AsyncMock()
    for method, ret in method_returns.items():
        getattr(service, method).return_value = ret
    return service


# ---------------------------------------------------------------------------
# Service unavailable
# ---------------------------------------------------------------------------

class TestServiceUnavailable:
    def test_search_no_service(self):
        with patch(_PATCH_SERVICE, return_value=None):
            result = asyncio.run(jira_search_issues("project = X"))
        assert result["status"] == "error"
        assert "not configured" in result["message"]

    def test_unconfigured_environment(self):
        # No env vars set (see conftest), so the real singleton yields None
        result = asyncio.run(jira_get_issue("PROJ-1"))
        assert result["status"] == "error"
        assert "JIRA_API_TOKEN" in result["message"]


# ---------------------------------------------------------------------------
# Tool functions
# ---------------------------------------------------------------------------

class TestSearchIssues:
    def test_returns_issues(self):
        service = _mock_service(
            search_issues={
                "startAt": 0,
                "maxResults": 10,
                "total": 2,
                "issues": [{"key": "PROJ-1"}, {"key": "PROJ-2"}],
            }
        )
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(jira_search_issues("project = PROJ"))

        assert result["status"] == "success"
        assert result["total"] == 2
        assert [i["key"] for i in result["issues"]] == ["PROJ-1", "PROJ-2"]
        service.search_issues.assert_awaited_once_with("project = PROJ", None, None, 10)

    def test_forwards_paging(self):
        service = _mock_service(search_issues={"issues": []})
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(
                jira_search_issues("project = PROJ", max_results=5, start_at=10, expand=["names"])
            )
        assert result["start_at"] == 10
        assert result["max_results"] == 5
        service.search_issues.assert_awaited_once_with("project = PROJ", 10, ["names"], 5)

    def test_handles_operation_error(self):
        service = AsyncMock()
        service.search_issues.side_effect = ApiOperationError(
            "Error searching issues", RuntimeError("timeout")
        )
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(jira_search_issues("project = PROJ"))
        assert result["status"] == "error"
        assert result["message"] == "Error searching issues: timeout"


class TestGetIssue:
    def test_returns_issue(self):
        issue = {"key": "PROJ-1", "fields": {"summary": "Broken build"}}
        service = _mock_service(get_issue=issue)
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(jira_get_issue("PROJ-1", expand="renderedFields"))
        assert result == {"status": "success", "issue": issue}
        service.get_issue.assert_awaited_once_with("PROJ-1", "renderedFields")

    def test_long_error_truncated(self):
        service = AsyncMock()
        service.get_issue.side_effect = ApiOperationError(
            "Error getting issue", RuntimeError("x" * 1000)
        )
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(jira_get_issue("PROJ-1"))
        assert result["status"] == "error"
        assert len(result["message"]) == 300
        assert result["message"].startswith("Error getting issue: ")


class TestComments:
    def test_get_comments(self):
        service = _mock_service(
            get_issue_comments={"comments": [{"id": "1", "body": "hi"}], "total": 1}
        )
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(jira_get_issue_comments("PROJ-1"))
        assert result["status"] == "success"
        assert result["issue_key"] == "PROJ-1"
        assert result["total"] == 1
        assert result["comments"][0]["body"] == "hi"

    def test_post_comment(self):
        service = _mock_service(post_issue_comment={"id": "10001", "body": "done"})
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(jira_post_issue_comment("PROJ-1", "done"))
        assert result["status"] == "success"
        assert result["comment"]["id"] == "10001"
        service.post_issue_comment.assert_awaited_once_with("PROJ-1", "done")


class TestCreateIssue:
    def test_creates_issue(self):
        service = _mock_service(create_issue={"id": "1", "key": "PROJ-9", "self": "x"})
        with patch(_PATCH_SERVICE, return_value=service):
            result = asyncio.run(
                jira_create_issue(
                    "PROJ", "Summary", "Description", "10002",
                    custom_fields={"priority": {"id": "1"}},
                )
            )
        assert result["status"] == "success"
        assert result["issue"]["key"] == "PROJ-9"
        service.create_issue.assert_awaited_once_with(
            "PROJ", "Summary", "Description", "10002", {"priority": {"id": "1"}}
        )


class TestEndToEndWithTransport:
    def test_search_through_real_service(self, mock_transport):
        from jiradc.service import JiraService

        transport, seen = mock_transport(json={"issues": [{"key": "A-1"}], "total": 1})
        jira_client._jira_service = JiraService("jira.example.com", "token", transport=transport)
        jira_client._initialized = True
        result = asyncio.run(jira_search_issues("project = A"))

        assert result["status"] == "success"
        assert result["total"] == 1
        assert seen[0].url.path == "/rest/api/2/search"


class TestSingleton:
    def test_built_from_environment(self, monkeypatch):
        monkeypatch.setenv("JIRA_API_TOKEN", "secret")
        monkeypatch.setenv("JIRA_HOST", "jira.example.com")
        service = jira_client.get_jira_service()
        assert service is not None
        assert service.config.base == "https://jira.example.com/rest"
        assert jira_client.get_jira_service() is service

    def test_base_path_wins_over_host(self, monkeypatch):
        monkeypatch.setenv("JIRA_API_TOKEN", "secret")
        monkeypatch.setenv("JIRA_HOST", "jira.example.com")
        monkeypatch.setenv("JIRA_API_BASE_PATH", "https://proxy.example.com/jira/rest")
        service = jira_client.get_jira_service()
        assert service.config.base == "https://proxy.example.com/jira/rest"

    def test_reset_rereads_environment(self, monkeypatch):
        assert jira_client.get_jira_service() is None
        monkeypatch.setenv("JIRA_API_TOKEN", "secret")
        monkeypatch.setenv("JIRA_HOST", "jira.example.com")
        assert jira_client.get_jira_service() is None
        jira_client.reset_jira_service()
        assert jira_client.get_jira_service() is not None


def test_function_tools_registered():
    names = [tool.name for tool in JIRA_TOOLS]
    assert names == [
        "jira_search_issues",
        "jira_get_issue",
        "jira_get_issue_comments",
        "jira_post_issue_comment",
        "jira_create_issue",
    ]
