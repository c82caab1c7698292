"""Commit model for cherry comparisons."""

from enum import Enum

from pydantic import BaseModel


class DiffType(str, Enum):
    """Direction of a commit in a cherry comparison."""

    ADDED = "added"
    REMOVED = "removed"

    @classmethod
    def from_marker(cls, marker: str) -> "DiffType":
        """Map a `git cherry` marker (``+`` or ``-``) to a diff type."""
        if marker == "+":
            return cls.ADDED
        if marker == "-":
            return cls.REMOVED
        raise ValueError(f"Unknown cherry marker: {marker!r}")


class Commit(BaseModel):
    """One entry of a `git cherry -v` listing.

    ``ADDED`` commits exist in the head range but not upstream, ``REMOVED``
    commits have an equivalent already applied upstream.
    """

    id: str
    message: str
    diff: DiffType

    @property
    def is_added(self) -> bool:
        return self.diff is DiffType.ADDED

    @property
    def is_removed(self) -> bool:
        return self.diff is DiffType.REMOVED
