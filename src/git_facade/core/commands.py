"""Git command facade returning structured results."""

import subprocess
from typing import TYPE_CHECKING, List, Optional, Sequence

from git_facade._logging import create_logger
from git_facade.config import GitSettings
from git_facade.core.parsing import parse_cherry_output, parse_name_status
from git_facade.core.runner import CommandRunner, GitRunner
from git_facade.exceptions import CommandExecutionError
from git_facade.models.commit import Commit
from git_facade.models.staged import StagedFileMap

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class GitCommands:
    """One method per git action, backed by a pluggable command runner.

    Read commands return git's trimmed stdout; a few parse it into models.
    When simulation is enabled every command is traced but skipped, and
    returns an empty string.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        settings: Optional[GitSettings] = None,
        logger: Optional["FilteringBoundLogger"] = None,
    ):
        self.settings = settings or GitSettings()
        self.runner = runner or GitRunner(
            working_dir=self.settings.working_dir,
            git_executable=self.settings.git_executable,
        )
        self.log = logger or create_logger(self.settings.log_level)

    @classmethod
    def from_env(cls) -> "GitCommands":
        """Create a facade configured from environment variables."""
        return cls(settings=GitSettings.from_env())

    def git(self, *args: str) -> str:
        """Run a git subcommand and return its trimmed output."""
        simulated = self.settings.is_simulating()
        self.log.debug("git_command", command=list(args), simulated=simulated)

        if simulated:
            return ""

        try:
            return self.runner.run(args)
        except CommandExecutionError as e:
            self.log.debug("git_command_failed", command=list(args), status=e.status)
            raise

    # Read commands

    def get_current_branch(self) -> str:
        return self.git("rev-parse", "--abbrev-ref", "HEAD")

    def checkout(self, *args: str) -> str:
        return self.git("checkout", *args)

    def branch(self, *args: str) -> str:
        return self.git("branch", *args)

    def cherry(self, *args: str) -> str:
        return self.git("cherry", *args)

    def checkout_branch(self, name: str) -> str:
        """Check out ``name``, creating the branch first if it does not exist."""
        try:
            return self.checkout(name)
        except CommandExecutionError:
            return self.checkout("-b", name)

    def get_commits(self, upstream: str, head: str) -> List[Commit]:
        """List commits of ``head`` compared against ``upstream``.

        Lines of the cherry listing that are not ``<+|-> <id> <message>``
        are ignored.
        """
        return parse_cherry_output(self.cherry("-v", upstream, head))

    def get_sha(self, file: str) -> str:
        """Most recent revision that touched ``file``, or "" if it has no history."""
        return self.git("log", "-n", "1", "--pretty=format:%H", "--", file)

    def get_shas(self, from_sha: str) -> List[str]:
        """Revisions reachable from HEAD but not from ``from_sha``."""
        return self.git("rev-list", f"{from_sha}..HEAD").splitlines()

    def get_staged_files_by_sha(self) -> StagedFileMap:
        """Group staged files by the last revision that touched them.

        Each name-status record is resolved through its first path only.
        Records whose file has no history are dropped.
        """
        staged: StagedFileMap = {}
        for files in parse_name_status(
            self.git("diff", "--cached", "--name-status", "-z")
        ):
            sha = self.get_sha(files[0])
            if not sha:
                continue
            staged.setdefault(sha, []).extend(files)
        return staged

    def merge_base(self, branch1: str, branch2: str) -> str:
        return self.git("merge-base", branch1, branch2)

    # Write commands

    def cherry_pick(self, *args: str) -> str:
        return self.git("cherry-pick", *args)

    def add(self, file: str) -> str:
        return self.git("add", "--", file)

    def fixup(self, sha: str) -> str:
        return self.git("commit", "--fixup", sha)

    def reset_to_head(self) -> None:
        self.git("reset", "HEAD", ".")

    def push(self, name: str) -> subprocess.CompletedProcess:
        """Push ``name`` to the configured remote and set it as upstream.

        Output goes straight to the terminal, so failures are reported only
        through the returned process' ``returncode``.
        """
        args: Sequence[str] = ["push", "--set-upstream", self.settings.remote, name]
        simulated = self.settings.is_simulating()
        self.log.debug("git_command", command=list(args), simulated=simulated)

        if simulated:
            return subprocess.CompletedProcess(args=list(args), returncode=0)

        return self.runner.stream(args)
