"""Exceptions raised by treefind.

Only two conditions are reported upward: a declined root path and an
invalid search selection. Filesystem failures during a build are absorbed
by the error policy and never show up here.
"""

from typing import Any, Optional


class TreeFindError(Exception):
    """Base class for all treefind errors."""


class ForbiddenRootError(TreeFindError):
    """Raised when a root path falls under a protected system location."""

    def __init__(self, path: str, entry: Optional[str] = None):
        """
        Args:
            path: The root path that was declined
            entry: The deny-list entry that matched
        """
        self.path = path
        self.entry = entry
        message = f"Directory is not allowed for safety reasons: {path!r}"
        if entry is not None:
            message += f" (matches {entry!r})"
        super().__init__(message)


class InvalidSelectionError(TreeFindError, ValueError):
    """Raised when a match/traversal selector pair is not recognized."""

    def __init__(self, match_mode: Any, traversal_mode: Any):
        self.match_mode = match_mode
        self.traversal_mode = traversal_mode
        super().__init__(
            f"Invalid selection: match={match_mode!r}, traversal={traversal_mode!r}"
        )
