"""Jira client exception hierarchy."""

from tracker_client_interface.client import NotFoundError as BaseNotFoundError


class JiraError(Exception):
    """Raised when the Jira API answers with a status the client treats as an error.

    Args:
        status_code: HTTP status code of the response (e.g. 404)
        status:      HTTP status line of the response (e.g. '404 Not Found')
        message:     Human readable detail
    """

    def __init__(self, status_code: int, status: str, message: str) -> None:
        self.status_code = status_code
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class NotFoundError(JiraError, BaseNotFoundError):
    """Raised on a 404; the message is always 'Not Found'."""

    def __init__(self, status: str = "404 Not Found") -> None:
        super().__init__(404, status, "Not Found")


class JiraServerError(JiraError):
    """Raised on a 5xx; the message is the raw response body."""


class JiraDecodeError(ValueError):
    """Raised when a response body is not the JSON shape the client expects."""


class JiraEncodeError(TypeError):
    """Raised when a request body cannot be encoded as JSON."""
