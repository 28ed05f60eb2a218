"""Core client contract definitions."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tracker_client_interface.issue import Issue

__all__ = ["IssueTrackerClient", "NotFoundError"]


class IssueTrackerClient(ABC):
    """Reads issues and projects from a tracker and comments on issues."""

    @abstractmethod
    def get_issue(self, key: str, fields: Sequence[str]) -> Issue:
        """Get an issue."""
        """Args:
            key:    The project-prefixed issue key (e.g. 'PROJ-42')
            fields: Names of the fields the tracker should return. An empty
                    sequence is sent as an empty selection, not omitted

        Returns:
            The corresponding Issue instance

        Raises:
            NotFoundError: If no issue with that key exists

        """
        raise NotImplementedError

    @abstractmethod
    def get_project_title(self, key: str) -> str:
        """Get the display name of a project."""
        """Args:
            key: The project key (e.g. 'PROJ')

        Raises:
            NotFoundError: If no project with that key exists

        """
        raise NotImplementedError

    @abstractmethod
    def comment(self, issue: str, message: str) -> None:
        """Add a comment to an issue."""
        """Args:
            issue:   The key of the issue to comment on
            message: The comment text, sent verbatim

        Notes on usage: Whatever the tracker answers on success is discarded.

        """
        raise NotImplementedError


class NotFoundError(Exception):
    """Base exception raised when an issue or project cannot be found by the client."""
