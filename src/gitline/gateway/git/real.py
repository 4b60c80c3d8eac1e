"""Production implementation of git diff queries using subprocess."""

import logging
import subprocess
from pathlib import Path

from gitline.gateway.git.abc import GitDiff

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT_SECONDS = 2.0

SHORTSTAT_ARGS = ["git", "diff", "--shortstat", "--ignore-submodules"]


class RealGitDiff(GitDiff):
    """Real implementation of git diff queries using subprocess."""

    def __init__(self, *, timeout: float = DEFAULT_GIT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    def shortstat(self, cwd: Path, *, staged: bool) -> str | None:
        """Run `git diff --shortstat` and return its stdout if usable."""
        cmd = [*SHORTSTAT_ARGS, "--staged"] if staged else list(SHORTSTAT_ARGS)
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                check=False,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired, subprocess.SubprocessError) as err:
            logger.debug("%s failed to run: %s", " ".join(cmd), err)
            return None

        if result.returncode != 0 or not result.stdout:
            logger.debug("%s returned %d with no usable output", " ".join(cmd), result.returncode)
            return None

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("%s produced non UTF-8 output", " ".join(cmd))
            return None
