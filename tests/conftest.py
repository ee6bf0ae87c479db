"""
Configuration for pytest.

This file provides common fixtures for all tests.
"""

import httpx
import pytest

_JIRA_ENV_VARS = ("JIRA_API_TOKEN", "JIRA_HOST", "JIRA_API_BASE_PATH")


@pytest.fixture(autouse=True)
def _clean_jira_env(monkeypatch):
    """Start every test without Jira settings and with a fresh singleton."""
    from jiradc.tools.jira import jira_client

    for name in _JIRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    jira_client._jira_service = None
    jira_client._initialized = False
    yield
    jira_client._jira_service = None
    jira_client._initialized = False


@pytest.fixture
def mock_transport():
    """Build an ``httpx.MockTransport`` that records requests.

    Usage::

        transport, seen = mock_transport(json={"key": "PROJ-1"})
    """

    def _factory(status_code=200, json=None, text=None):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(handler), seen

    return _factory
