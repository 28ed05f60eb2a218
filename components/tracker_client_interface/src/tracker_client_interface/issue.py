"""Issue contract - Core issue representation."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

__all__ = ["Issue"]


class Issue(ABC):
    """Abstract base class representing an issue fetched from a tracker."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the tracker's internal identifier of the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def key(self) -> str:
        """Return the project-prefixed issue key (e.g. 'PROJ-123')."""
        raise NotImplementedError

    @property
    @abstractmethod
    def summary(self) -> str:
        """Return the issue summary, or an empty string if it was not returned."""
        raise NotImplementedError

    @property
    @abstractmethod
    def project(self) -> str:
        """Return the lower-cased project key the issue belongs to."""
        raise NotImplementedError

    @property
    @abstractmethod
    def fields(self) -> Mapping[str, Any]:
        """Return every field the tracker returned for the issue, verbatim."""
        raise NotImplementedError

    #equivalent to Javas .toString()
    def __repr__(self) -> str:
        return f"<Issue id={self.id!r} key={self.key!r} summary={self.summary!r}>"
