"""Decoding of Jira project responses."""

from jira_client_impl.jira_json import load_object, require


def decode_project_title(data: bytes) -> str:
    """Return the display name from the body of a Jira ``GET project/<key>`` response.

    Raises:
        JiraDecodeError: If the body is not a JSON object with a string ``name``.
    """
    payload = load_object(data, "project")
    return require(payload, "name", str, "project")
