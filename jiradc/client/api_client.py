"""
Low-level HTTP plumbing for the Jira Data Center REST API.

Every service call goes through ``request()`` which builds the URL from an
explicit ``ClientConfig``, attaches the bearer token and raises ``ApiError``
for any non-2xx response.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings owned by a single service instance."""

    base: str
    token: str
    version: str = "2"

    def url_for(self, path: str) -> str:
        return f"{self.base.rstrip('/')}/api/{self.version}{path}"


class ApiError(Exception):
    """Raised when Jira answers with a non-2xx status."""

    def __init__(self, url: str, status: int, reason: str, body: Any = None):
        self.url = url
        self.status = status
        self.reason = reason
        self.body = body
        message = f"{status} {reason}".strip()
        if body:
            message = f"{message} - {str(body)[:500]}"
        super().__init__(message)


class JiraApiClient:
    """Thin async wrapper around ``httpx.AsyncClient`` for one ``ClientConfig``."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {config.token}",
        }

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = self.config.url_for(path)
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        async with httpx.AsyncClient(
            headers=self._headers, transport=self._transport
        ) as client:
            resp = await client.request(method, url, params=params or None, json=json_body)

        logger.debug("Jira %s %s - Status: %d", method, path, resp.status_code)
        if not resp.is_success:
            logger.debug(
                "Jira %s %s returned %d: %s",
                method,
                path,
                resp.status_code,
                resp.text[:500],
            )
            raise ApiError(url, resp.status_code, resp.reason_phrase, _body_of(resp))

        if not resp.content:
            return None
        return resp.json()


def _body_of(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text
