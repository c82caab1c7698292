"""Git Facade - structured results from the git command line."""

from git_facade.config import GitSettings
from git_facade.core.commands import GitCommands
from git_facade.core.runner import CommandRunner, GitRunner
from git_facade.exceptions import CommandExecutionError, GitFacadeError
from git_facade.models import Commit, DiffType, StagedFileMap

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "CommandExecutionError",
    "CommandRunner",
    "DiffType",
    "GitCommands",
    "GitFacadeError",
    "GitRunner",
    "GitSettings",
    "StagedFileMap",
]
