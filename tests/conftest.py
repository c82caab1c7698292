"""Shared fixtures for Git Facade tests."""

import subprocess
import tempfile
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest
import structlog
from git import Repo
from structlog.testing import CapturingLogger, LogCapture

from git_facade.config import GitSettings
from git_facade.core.commands import GitCommands
from git_facade.core.runner import GitRunner
from git_facade.exceptions import CommandExecutionError


class FakeRunner:
    """Records commands and answers them from canned outputs."""

    def __init__(self):
        self.calls: List[Tuple[str, ...]] = []
        self.streamed: List[Tuple[str, ...]] = []
        self.outputs: Dict[Tuple[str, ...], str] = {}
        self.failures: Dict[Tuple[str, ...], str] = {}

    def respond(self, args: Sequence[str], output: str) -> None:
        self.outputs[tuple(args)] = output

    def fail(self, args: Sequence[str], stderr: str = "error") -> None:
        self.failures[tuple(args)] = stderr

    def run(self, args: Sequence[str]) -> str:
        key = tuple(args)
        self.calls.append(key)
        if key in self.failures:
            raise CommandExecutionError(["git", *key], status=1, stderr=self.failures[key])
        return self.outputs.get(key, "")

    def stream(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        self.streamed.append(tuple(args))
        return subprocess.CompletedProcess(args=["git", *args], returncode=0)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def log_capture():
    return LogCapture()


@pytest.fixture
def commands(fake_runner, log_capture):
    """GitCommands wired to a fake runner with simulation off."""
    logger = structlog.wrap_logger(CapturingLogger(), processors=[log_capture])
    return GitCommands(
        runner=fake_runner, settings=GitSettings(simulate=False), logger=logger
    )


@pytest.fixture
def temp_git_project():
    """Create a temporary git project with an initial commit."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_path = Path(temp_dir)

        repo = Repo.init(project_path)
        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")

        (project_path / "main.py").write_text("def main():\n    print('Hello')\n")
        (project_path / "utils.py").write_text("def helper():\n    return 42\n")
        (project_path / "README.md").write_text("# Test Project\n")

        repo.index.add(["main.py", "utils.py", "README.md"])
        repo.index.commit("Initial commit")

        yield project_path


@pytest.fixture
def project_commands(temp_git_project):
    """GitCommands running real git inside the temporary project."""
    return GitCommands(
        runner=GitRunner(working_dir=temp_git_project),
        settings=GitSettings(simulate=False, working_dir=temp_git_project),
    )
