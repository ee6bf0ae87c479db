"""
Environment-driven settings for the Jira service.

``JIRA_API_TOKEN`` is always required; the server is addressed either by
``JIRA_HOST`` (base URL becomes ``https://<host>/rest``) or by a full
``JIRA_API_BASE_PATH``.
"""

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

JIRA_API_TOKEN = "JIRA_API_TOKEN"
JIRA_HOST = "JIRA_HOST"
JIRA_API_BASE_PATH = "JIRA_API_BASE_PATH"

REQUIRED_ENV_VARS = (JIRA_API_TOKEN,)


@dataclass(frozen=True)
class JiraSettings:
    host: Optional[str]
    api_token: Optional[str]
    api_base_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "JiraSettings":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get(JIRA_HOST) or None,
            api_token=env.get(JIRA_API_TOKEN) or None,
            api_base_path=env.get(JIRA_API_BASE_PATH) or None,
        )


def validate_config(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the names of required settings missing from the environment.

    An empty list means the service can be constructed.
    """
    env = os.environ if environ is None else environ
    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
    if not env.get(JIRA_HOST) and not env.get(JIRA_API_BASE_PATH):
        missing.append(f"{JIRA_HOST} or {JIRA_API_BASE_PATH}")
    return missing
