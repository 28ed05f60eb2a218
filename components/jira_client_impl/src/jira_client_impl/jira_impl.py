"""
Authentication
--------------
Requests are signed with HTTP Basic auth (user + password or API token).
The client supports two credential modes:

1. When get_client(interactive = True)
    User is prompted for the values below at runtime if any are missing from the environment.
2. When get_client(interactive = False) - Default
        JIRA_BASE_URL         https://myorg.atlassian.net/rest/api/2/
        JIRA_USER_EMAIL       me@example.com
        JIRA_API_TOKEN        <token from https://id.atlassian.com/manage-profile/security/api-tokens>
        JIRA_CONNECT_TIMEOUT  10   (optional, seconds)

Dependencies:
    uv add requests

"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import json
import logging
import math
import os
from collections.abc import Sequence
from datetime import timedelta
from getpass import getpass
from urllib.parse import urlsplit

import requests
from requests.auth import HTTPBasicAuth
from requests.exceptions import InvalidURL

from jira_client_impl.jira_errors import (
    JiraEncodeError,
    JiraServerError,
    NotFoundError,
)
from jira_client_impl.jira_issue import JiraIssue, decode_issue
from jira_client_impl.jira_project import decode_project_title
from tracker_client_interface.client import IssueTrackerClient

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 10.0

_CONTENT_TYPE = "application/json; charset=utf-8"

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class JiraClient(IssueTrackerClient):
    """
    Args:
        base_url: Jira REST API root URL (e.g. 'https://myorg.atlassian.net/rest/api/2/')
        user:     Jira username or account email
        password: Password or API token generated from Atlassian account settings
        timeout:  Connect timeout, in seconds or as a timedelta. Only establishing
                  the TCP connection is bounded; reads and writes are not

    Raises:
        InvalidURL: If base_url is not an absolute http(s) URL.
        ValueError: If timeout is not a finite positive number.
    """

    def __init__(
        self,
        base_url: str,
        user: str,
        password: str,
        timeout: float | timedelta = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        self._base_url = _parse_base_url(base_url)
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"Connect timeout must be a positive number, got {timeout!r}")
        self._connect_timeout = float(timeout)
        self._session = requests.Session()
        self._session.auth = HTTPBasicAuth(user, password)
        self._session.headers.update({"Content-Type": _CONTENT_TYPE})

    @property
    def base_url(self) -> str:
        """Return the normalized base URL, always ending with '/'."""
        return self._base_url

    @property
    def connect_timeout(self) -> float:
        """Return the connect timeout in seconds."""
        return self._connect_timeout

    def close(self) -> None:
        """Release the pooled connections held by the underlying session."""
        self._session.close()

    def __enter__(self) -> JiraClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        #raw concatenation: keys and paths are sent exactly as given
        return self._base_url + path

    def _get(self, path: str) -> bytes:
        return self.request("GET", path)

    def _post(self, path: str, body: bytes) -> bytes:
        return self.request("POST", path, body)

    def request(self, method: str, path: str, body: bytes = b"") -> bytes:
        """Send one authenticated request and return the full response body.

        Args:
            method: HTTP method (e.g. 'GET')
            path:   Path relative to the base URL, query string included
            body:   Request payload, already JSON-encoded

        Returns:
            The raw response body for every status other than 404 and 5xx.
            No JSON validation happens here.

        Raises:
            NotFoundError:     On 404.
            JiraServerError:   On any status >= 500.
            requests.RequestException: On connection, timeout or read failures, unchanged.
        """
        url = self._url(path)
        logger.debug("%s %s", method, url)
        # (connect, read): only the connect phase is bounded
        with self._session.request(
            method, url, data=body, timeout=(self._connect_timeout, None),
        ) as response:
            data = response.content
        logger.debug("%s %s -> %s", method, url, response.status_code)
        self._raise_for_status(response, data)
        return data

    @staticmethod
    def _raise_for_status(response: requests.Response, data: bytes) -> None:
        status = _status_line(response)
        if response.status_code == 404:
            logger.debug("Resource not found: %s", response.url)
            raise NotFoundError(status)
        if response.status_code >= 500:
            message = data.decode("utf-8", errors="replace")
            logger.warning("Jira server error %s for %s", status, response.url)
            raise JiraServerError(response.status_code, status, message)

    # ------------------------------------------------------------------
    # IssueTrackerClient contract
    # ------------------------------------------------------------------

    def get_issue(self, key: str, fields: Sequence[str]) -> JiraIssue:
        """Fetch a single Jira issue by key, restricted to the given fields."""
        #an empty selection still sends "fields=" so Jira applies it
        data = self._get(f"issue/{key}/?fields={','.join(fields)}")
        return decode_issue(data)

    def get_project_title(self, key: str) -> str:
        """Fetch the display name of a Jira project."""
        data = self._get(f"project/{key}")
        return decode_project_title(data)

    def comment(self, issue: str, message: str) -> None:
        """Post a comment on a Jira issue; the response body is discarded."""
        self._post(f"issue/{issue}/comment", _comment_body(message))


# ---------------------------------------------------------------------------
# Request/response helpers
# ---------------------------------------------------------------------------

def _parse_base_url(base_url: str) -> str:
    """Validate base_url and make sure it ends with a single trailing '/'."""
    try:
        parts = urlsplit(base_url)
        #port is only validated on access
        parts.port
    except (TypeError, ValueError) as exc:
        raise InvalidURL(f"Invalid Jira base URL {base_url!r}: {exc}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURL(
            f"Invalid Jira base URL {base_url!r}: expected an absolute http(s) URL"
        )
    if not base_url.endswith("/"):
        base_url += "/"
    return base_url


def _status_line(response: requests.Response) -> str:
    #mirrors the HTTP status line, e.g. "404 Not Found"
    if response.reason:
        return f"{response.status_code} {response.reason}"
    return str(response.status_code)


def _comment_body(message: str) -> bytes:
    """
    Notes on usage:
        Jira's v2 comment endpoint takes the comment text verbatim under "body"
    """
    if not isinstance(message, str):
        raise JiraEncodeError("Input must be a string")
    return json.dumps({"body": message}).encode("utf-8")


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(*, interactive: bool = False) -> JiraClient:
    """Return a configured JiraClient.

    Reads credentials from environment variables. If "interactive = True" and
    any variable is missing, the user will be prompted.

    Environment variables:
        JIRA_BASE_URL:         Jira REST API root URL.
        JIRA_USER_EMAIL:       Jira username or Atlassian account email.
        JIRA_API_TOKEN:        Password or API token.
        JIRA_CONNECT_TIMEOUT:  Optional connect timeout in seconds (default 10).
    """
    base_url = os.environ.get("JIRA_BASE_URL", "")
    user = os.environ.get("JIRA_USER_EMAIL", "")
    token = os.environ.get("JIRA_API_TOKEN", "")
    raw_timeout = os.environ.get("JIRA_CONNECT_TIMEOUT", "")

    if interactive:
        if not base_url:
            base_url = input("Jira base URL (e.g. https://myorg.atlassian.net/rest/api/2/): ").strip()
        if not user:
            user = input("Jira user: ").strip()
        if not token:
            token = getpass("Jira password or API token: ")
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("JIRA_BASE_URL", base_url),
            ("JIRA_USER_EMAIL", user),
            ("JIRA_API_TOKEN", token),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    timeout = DEFAULT_CONNECT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise EnvironmentError(
                f"JIRA_CONNECT_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

    logger.debug("Creating Jira client for %s", base_url)
    return JiraClient(base_url, user, token, timeout)
