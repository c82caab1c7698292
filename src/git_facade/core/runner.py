"""Command runners that execute git and return its output."""

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

import git

from git_facade.exceptions import CommandExecutionError


class CommandRunner(Protocol):
    """Capability to execute git subcommands.

    ``args`` never include the executable itself, e.g. ``["log", "-n", "1"]``.
    """

    def run(self, args: Sequence[str]) -> str:
        """Run a command, returning stripped stdout or raising CommandExecutionError."""
        ...

    def stream(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        """Run a command attached to the caller's terminal.

        Never raises for a failed or missing executable; the outcome is the
        returned ``returncode`` (127 when git cannot be found).
        """
        ...


class GitRunner:
    """Runs the git executable through GitPython without a shell."""

    def __init__(
        self, working_dir: Optional[Path] = None, git_executable: str = "git"
    ):
        self.working_dir = Path(working_dir) if working_dir is not None else None
        self.git_executable = git_executable
        self._git = git.Git(str(self.working_dir) if self.working_dir else None)

    def command_for(self, args: Sequence[str]) -> List[str]:
        """Full command line for the given subcommand arguments."""
        return [self.git_executable, *args]

    def run(self, args: Sequence[str]) -> str:
        command = self.command_for(args)
        try:
            status, stdout, stderr = self._git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except git.exc.GitCommandNotFound as e:
            raise CommandExecutionError(command, stderr=str(e)) from e

        if status != 0:
            raise CommandExecutionError(command, status=status, stderr=stderr.strip())
        return stdout.strip()

    def stream(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        command = self.command_for(args)
        cwd = str(self.working_dir) if self.working_dir else None
        try:
            return subprocess.run(command, cwd=cwd, check=False)  # noqa: S603
        except FileNotFoundError:
            # Same status a shell reports for a missing command
            return subprocess.CompletedProcess(args=command, returncode=127)
