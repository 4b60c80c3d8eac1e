"""Abstract base class for git diff queries.

The only git subprocess gitline needs is `git diff --shortstat`, once for
the index and once for the working tree. Hiding it behind this interface
keeps the rest of the package testable without a git binary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitDiff(ABC):
    """Abstract interface for shortstat diff queries.

    This interface contains ONLY query operations (no mutations).
    """

    @abstractmethod
    def shortstat(self, cwd: Path, *, staged: bool) -> str | None:
        """Return the one-line shortstat summary for a diff.

        Args:
            cwd: Working directory to run the diff in
            staged: If True, compare the index against HEAD (`--staged`);
                otherwise compare the working tree against the index

        Returns:
            The decoded summary, or None when git failed, timed out,
            printed nothing, or printed something that is not UTF-8
        """
        ...
