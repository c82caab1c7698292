"""Exceptions raised by Git Facade."""

from typing import List, Optional, Sequence


class GitFacadeError(Exception):
    """Base class for Git Facade errors."""


class CommandExecutionError(GitFacadeError):
    """A git command exited non-zero or could not be started."""

    def __init__(
        self,
        command: Sequence[str],
        status: Optional[int] = None,
        stderr: str = "",
    ):
        self.command: List[str] = list(command)
        self.status = status
        self.stderr = stderr
        message = f"Git command failed: {' '.join(self.command)}"
        if status is not None:
            message += f" (exit code {status})"
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message)
