"""Minimal Jira REST API client: issues, project titles and comments."""

from jira_client_impl.jira_errors import (
    JiraDecodeError,
    JiraEncodeError,
    JiraError,
    JiraServerError,
    NotFoundError,
)
from jira_client_impl.jira_impl import JiraClient, get_client
from jira_client_impl.jira_issue import JiraIssue

__all__ = [
    "JiraClient",
    "JiraDecodeError",
    "JiraEncodeError",
    "JiraError",
    "JiraIssue",
    "JiraServerError",
    "NotFoundError",
    "get_client",
]
