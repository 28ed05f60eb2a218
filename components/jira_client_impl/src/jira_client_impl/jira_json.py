"""Checked access to schema-less JSON payloads.

Responses are decoded into plain dicts and every value the client relies
on is pulled out through ``require``, so a missing or mis-typed field
becomes a ``JiraDecodeError`` instead of a ``KeyError`` or ``TypeError``
somewhere further down.
"""
from __future__ import annotations

import json
from typing import Any, TypeVar

from jira_client_impl.jira_errors import JiraDecodeError

T = TypeVar("T")

# JSON type names used in error messages
_JSON_NAMES: dict[type, str] = {
    str: "a string",
    dict: "an object",
    list: "an array",
    int: "a number",
    float: "a number",
    bool: "a boolean",
}


def load_object(data: bytes, what: str) -> dict[str, Any]:
    """Parse ``data`` as a JSON object.

    Args:
        data: Raw response body
        what: Name of the payload for error messages (e.g. 'issue')

    Raises:
        JiraDecodeError: If ``data`` is not valid JSON or not a JSON object.
    """
    try:
        decoded = json.loads(data)
    except (UnicodeDecodeError, ValueError) as exc:
        raise JiraDecodeError(f"{what} response is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise JiraDecodeError(f"{what} response is nested too deeply") from exc
    if not isinstance(decoded, dict):
        raise JiraDecodeError(
            f"{what} response must be a JSON object, got {_describe(decoded)}"
        )
    return decoded


def require(payload: dict[str, Any], name: str, kind: type[T], what: str) -> T:
    """Return ``payload[name]`` if present and an instance of ``kind``.

    Raises:
        JiraDecodeError: If the field is missing or has another type.
    """
    if name not in payload:
        raise JiraDecodeError(f"{what} response is missing '{name}'")
    value = payload[name]
    #bool is a subclass of int in Python but a distinct type in JSON
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise JiraDecodeError(
            f"{what} field '{name}' must be {_JSON_NAMES.get(kind, kind.__name__)}, "
            f"got {_describe(value)}"
        )
    return value


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    return _JSON_NAMES.get(type(value), type(value).__name__)
