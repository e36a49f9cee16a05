from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Protocol
from urllib.parse import urlencode

import requests
from requests.structures import CaseInsensitiveDict

from github_api_actions.errors import TRANSPORT_FAILURE_STATUS, InvalidArgument
from github_api_actions.http.response import ApiResponse
from github_api_actions.utils.logging import get_logger

DEFAULT_ACCEPT = "application/vnd.github.v3+json"
DEFAULT_USER_AGENT = "github-api-actions"
SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class HttpClient(Protocol):
    """Protocol for GitHub API clients."""

    def perform(
        self,
        method: str,
        path: str,
        token: str,
        server_url: str,
        params: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse: ...


class GithubApiClient:
    """GitHub REST client using the requests library.

    Makes exactly one HTTP call per ``perform`` and never retries. HTTP error
    statuses come back as data; transport faults come back as status 0.
    """

    def __init__(self, timeout_s: int = 30, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.timeout_s = timeout_s
        self.log = get_logger("github_api_actions.http")

    def perform(
        self,
        method: str,
        path: str,
        token: str,
        server_url: str,
        params: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse:
        """
        Send one request to the GitHub API and normalize the response.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE).
            path: API-relative path, e.g. "/repos/octocat/Hello-World/issues".
            token: Credential sent as ``Authorization: token <token>``.
            server_url: API base URL, e.g. "https://api.github.com".
            params: Query parameters for GET, request body otherwise.
            headers: Headers merged over the defaults.

        Returns:
            The normalized response.

        Raises:
            InvalidArgument: If the token, path or server URL is empty or the method is unknown.
        """
        verb = str(method or "GET").upper()
        if verb not in SUPPORTED_METHODS:
            raise InvalidArgument(f"Unsupported HTTP method: {method}")
        if not token:
            raise InvalidArgument("No GitHub API token given, pass using `api_token`")
        if not path:
            raise InvalidArgument("GitHub API path cannot be empty")
        if not server_url:
            raise InvalidArgument("GitHub API server URL cannot be empty")

        request_headers = self._headers(token, headers)

        if verb == "GET" and params:
            sep = "&" if "?" in path else "?"
            path = f"{path}{sep}{urlencode(params, doseq=True)}"
            params = None

        url = f"{server_url.rstrip('/')}{path}"

        data: Any = None
        if verb != "GET" and params is not None:
            if isinstance(params, (dict, list)):
                data = json.dumps(params)
                request_headers["Content-Type"] = "application/json"
            else:
                data = params

        self.log.debug("%s : %s", verb, url)

        try:
            r = self.session.request(
                method=verb,
                url=url,
                headers=request_headers,
                data=data,
                timeout=self.timeout_s,
                allow_redirects=True,
            )
        except (requests.RequestException, OSError) as e:
            self.log.warning("%s %s failed (exception=%s)", verb, url, type(e).__name__)
            return ApiResponse(status=TRANSPORT_FAILURE_STATUS, body=str(e), json=None)

        body = r.text or ""
        ct = r.headers.get("Content-Type", "")

        js = None
        if body and "application/json" in ct:
            try:
                js = json.loads(body)
            except ValueError:
                js = {}

        self.log.debug("%s %s -> %s", verb, url, r.status_code)
        return ApiResponse(status=int(r.status_code), body=body, json=js)

    def _headers(self, token: str, extra: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict(extra or {})
        headers.setdefault("User-Agent", DEFAULT_USER_AGENT)
        headers["Authorization"] = f"token {token}"
        headers.setdefault("Accept", DEFAULT_ACCEPT)
        return headers
