"""
Lazy-initialized singleton Jira service.

Reads JIRA_HOST / JIRA_API_BASE_PATH / JIRA_API_TOKEN from the environment
on first use.

Returns None when unconfigured so tools can handle gracefully.
"""

import logging
from typing import Optional

from jiradc.config.settings import JiraSettings, validate_config
from jiradc.service import JiraService

logger = logging.getLogger(__name__)

_jira_service: Optional[JiraService] = None
_initialized = False


def get_jira_service() -> Optional[JiraService]:
    """Return the singleton Jira service, or None if unconfigured."""
    global _jira_service, _initialized

    if _initialized:
        return _jira_service

    _initialized = True

    missing = validate_config()
    if missing:
        logger.info(
            "Jira integration not configured, missing: %s", ", ".join(missing)
        )
        return None

    settings = JiraSettings.from_env()
    _jira_service = JiraService(
        settings.host or "",
        settings.api_token,
        settings.api_base_path,
    )
    return _jira_service


def reset_jira_service() -> None:
    """Clear the singleton so the next call re-initializes with fresh config."""
    global _jira_service, _initialized
    _jira_service = None
    _initialized = False
    logger.info("Jira service singleton reset")
