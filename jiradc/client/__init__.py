"""
Async client for the Jira Data Center REST API.
"""

from .api_client import ApiError, ClientConfig, JiraApiClient
from .models import CommentBody, IssueUpdate, SearchRequest
from .services import IssueService, SearchService

__all__ = [
    "ApiError",
    "ClientConfig",
    "JiraApiClient",
    "CommentBody",
    "IssueUpdate",
    "SearchRequest",
    "IssueService",
    "SearchService",
]
