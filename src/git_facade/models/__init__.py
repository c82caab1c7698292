"""Data models for Git Facade."""

from .commit import Commit, DiffType
from .staged import StagedFileMap

__all__ = ["Commit", "DiffType", "StagedFileMap"]
