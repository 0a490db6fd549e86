"""Low-level HTTP clients for the Jira Cloud REST API and the Atlassian admin API.

Handles authentication, headers, timeouts and error mapping.
"""
from __future__ import annotations
import logging
import os
from typing import Optional, Dict, Any

import requests
from requests.auth import HTTPBasicAuth

from jira_provider import __version__
from .exceptions import JiraAPIError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = float(os.environ.get("JIRA_REQUEST_TIMEOUT", "10"))
ADMIN_API_URL = "https://api.atlassian.com"


class AtlassianClient:
    """Shared HTTP plumbing for Atlassian APIs.

    Subclasses decide how requests are authenticated by overriding
    ``_auth_kwargs``. Every non-2xx response raises ``JiraAPIError``.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def _auth_kwargs(self) -> Dict[str, Any]:
        return {}

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"jira-provider/{__version__}",
        }

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        json: Optional[Any] = None,
    ) -> requests.Response:
        """Execute an authenticated request.

        Args:
            method: HTTP method
            path: API endpoint path (e.g., "/rest/api/3/user")
            params: Query parameters
            json: JSON payload

        Returns:
            Response object

        Raises:
            JiraAPIError: On HTTP error or when the request could not be sent
        """
        url = f"{self.base_url}{path}"
        headers = self._headers()
        if json is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = requests.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=REQUEST_TIMEOUT,
                **self._auth_kwargs(),
            )
        except requests.RequestException as exc:
            raise JiraAPIError(0, str(exc), url) from exc

        self._handle_error(resp)
        return resp

    def get(self, path: str, params: Optional[Dict] = None) -> requests.Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Optional[Any] = None, params: Optional[Dict] = None) -> requests.Response:
        return self.request("POST", path, params=params, json=json)

    def delete(self, path: str, params: Optional[Dict] = None) -> requests.Response:
        return self.request("DELETE", path, params=params)

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            JiraAPIError: If response status indicates error
        """
        if resp.status_code >= 400:
            raise JiraAPIError(resp.status_code, resp.text, resp.url)


class JiraClient(AtlassianClient):
    """Jira Cloud REST client authenticated with an account email and API token.

    Usage:
        client = JiraClient("https://acme.atlassian.net", "bot@acme.io", "api-token")
        response = client.get("/rest/api/3/myself")
    """

    def __init__(self, site_url: str, email: str, token: str):
        super().__init__(site_url)
        self.email = email
        self._token = token

    def _auth_kwargs(self) -> Dict[str, Any]:
        return {"auth": HTTPBasicAuth(self.email, self._token)}


class AdminClient(AtlassianClient):
    """Atlassian organization admin API client authenticated with a bearer token."""

    def __init__(self, admin_token: str, base_url: Optional[str] = None):
        super().__init__(base_url or os.environ.get("ATLASSIAN_ADMIN_URL", ADMIN_API_URL))
        self._token = admin_token

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["Authorization"] = f"Bearer {self._token}"
        return headers
