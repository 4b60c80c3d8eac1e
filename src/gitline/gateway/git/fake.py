"""Fake implementation of git diff queries for testing."""

from __future__ import annotations

from pathlib import Path

from gitline.gateway.git.abc import GitDiff


class FakeGitDiff(GitDiff):
    """In-memory fake that returns pre-configured shortstat summaries.

    This class has NO public setup methods. All state is provided via constructor.
    Every query is recorded in `calls` so tests can assert probe order.
    """

    def __init__(self, *, staged: str | None = None, unstaged: str | None = None) -> None:
        """Create FakeGitDiff with configured summaries.

        Args:
            staged: Summary returned for `staged=True` queries, or None
            unstaged: Summary returned for `staged=False` queries, or None
        """
        self._staged = staged
        self._unstaged = unstaged
        self._calls: list[tuple[Path, bool]] = []

    @property
    def calls(self) -> list[tuple[Path, bool]]:
        """Recorded `(cwd, staged)` pairs, in call order."""
        return list(self._calls)

    def shortstat(self, cwd: Path, *, staged: bool) -> str | None:
        self._calls.append((cwd, staged))
        return self._staged if staged else self._unstaged
