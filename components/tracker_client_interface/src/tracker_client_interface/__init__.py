"""Tracker-agnostic client contract."""

from tracker_client_interface.client import IssueTrackerClient, NotFoundError
from tracker_client_interface.issue import Issue

__all__ = ["Issue", "IssueTrackerClient", "NotFoundError"]
