"""Environment-driven settings for Git Facade."""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

SIMULATE_ENV = "SIMULATE"
GIT_EXECUTABLE_ENV = "GIT_FACADE_GIT"
REMOTE_ENV = "GIT_FACADE_REMOTE"
WORKING_DIR_ENV = "GIT_FACADE_WORKING_DIR"
LOG_LEVEL_ENV = "GIT_FACADE_LOG_LEVEL"
DEBUG_ENV = "GIT_FACADE_DEBUG"


def simulation_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when the SIMULATE flag is set to any non-empty value."""
    env = os.environ if environ is None else environ
    return bool(env.get(SIMULATE_ENV))


class GitSettings(BaseModel):
    """Runtime settings for the git command facade.

    ``simulate=None`` defers to the ``SIMULATE`` environment variable, which
    is then read on every command rather than once at construction.
    """

    simulate: Optional[bool] = None
    git_executable: str = "git"
    remote: str = "origin"
    working_dir: Optional[Path] = None
    log_level: str = "debug"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GitSettings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        working_dir = env.get(WORKING_DIR_ENV)
        log_level = "debug" if env.get(DEBUG_ENV) else env.get(LOG_LEVEL_ENV, "debug")

        return cls(
            git_executable=env.get(GIT_EXECUTABLE_ENV) or "git",
            remote=env.get(REMOTE_ENV) or "origin",
            working_dir=Path(working_dir) if working_dir else None,
            log_level=log_level,
        )

    def is_simulating(self) -> bool:
        """Check whether commands should be skipped right now."""
        if self.simulate is not None:
            return self.simulate
        return simulation_enabled()
