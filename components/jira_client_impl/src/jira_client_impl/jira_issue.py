"""Jira Issue implementation."""
from __future__ import annotations

from typing import Any

from jira_client_impl.jira_json import load_object, require
from tracker_client_interface.issue import Issue


def project_from_key(key: str) -> str:
    """Return the lower-cased project part of an issue key ('PROJ-42' -> 'proj').

    A key without a '-' is taken whole.
    """
    return key.split("-", 1)[0].lower()


# ------------------------------------------------------------------
# Issue implementation
# ------------------------------------------------------------------
class JiraIssue(Issue):
    """Concrete Issue backed by a Jira issue API response.

    Construct via the module-level ``decode_issue()`` factory rather than
    instantiating directly.

    Args:
        issue_id: The Jira internal issue id (e.g. '10001').
        key:      The Jira issue key (e.g. 'PROJ-42').
        raw_data: The ``fields``-level dict from the Jira REST API response.
    """

    def __init__(self, issue_id: str, key: str, raw_data: dict[str, Any]) -> None:
        """Initialize JiraIssue."""
        self._id = issue_id
        self._key = key
        self._project = project_from_key(key)
        self._raw = dict(raw_data)

    @property
    def id(self) -> str:
        """Return id."""
        return self._id

    @property
    def key(self) -> str:
        """Return key."""
        return self._key

    @property
    def summary(self) -> str:
        """Return summary."""
        #fields is caller-selected, so summary may not be there at all
        summary = self._raw.get("summary")
        return summary if isinstance(summary, str) else ""

    @property
    def project(self) -> str:
        """Return project."""
        return self._project

    @property
    def fields(self) -> dict[str, Any]:
        """Return a copy of the field-bag."""
        return dict(self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JiraIssue):
            return NotImplemented
        return (self._id, self._key, self._raw) == (other._id, other._key, other._raw)

    __hash__ = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Decode issue
# ---------------------------------------------------------------------------

def decode_issue(data: bytes) -> JiraIssue:
    """Return a JiraIssue from the body of a Jira ``GET issue/<key>`` response.

    Args:
        data: Raw response body, expected to look like
              ``{"id": "...", "key": "...", "fields": {...}}``.

    Returns:
        A JiraIssue instance conforming to the Issue contract.

    Raises:
        JiraDecodeError: If the body is not JSON, or ``id``, ``key`` or
            ``fields`` are missing or of the wrong type.
    """
    payload = load_object(data, "issue")
    issue_id = require(payload, "id", str, "issue")
    key = require(payload, "key", str, "issue")
    fields = require(payload, "fields", dict, "issue")
    return JiraIssue(issue_id, key, fields)
