"""
jiradc - Jira Data Center operations for tool-calling agents.
"""

__version__ = "0.1.0"

from jiradc.service import JiraService
from jiradc.tools.shared.errors import ApiOperationError, handle_api_operation

__all__ = ["JiraService", "ApiOperationError", "handle_api_operation"]
