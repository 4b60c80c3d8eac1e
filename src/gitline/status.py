"""Working-tree change counts from `git diff --shortstat`."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from gitline.gateway.git.abc import GitDiff

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class Staged:
    """Files with changes in the index."""

    count: int


@dataclass(frozen=True)
class Unstaged:
    """Files with changes in the working tree only."""

    count: int


ChangeStatus = Staged | Unstaged


def parse_shortstat_count(summary: str) -> int | None:
    """Extract the file count from a shortstat line.

    `" 3 files changed, 10 insertions(+)"` gives 3. Returns None when the
    summary does not start with digits after leading whitespace.
    """
    match = _LEADING_DIGITS.match(summary.lstrip())
    if match is None:
        return None
    return int(match.group())


def _probe(git: GitDiff, cwd: Path, *, staged: bool) -> int | None:
    summary = git.shortstat(cwd, staged=staged)
    if summary is None:
        return None
    count = parse_shortstat_count(summary)
    logger.debug("staged=%s shortstat %r -> %s", staged, summary, count)
    return count


def probe_change_status(git: GitDiff, cwd: Path) -> ChangeStatus | None:
    """Report staged changes if any, otherwise unstaged changes.

    The unstaged diff is only run when the staged one reports nothing.
    """
    staged = _probe(git, cwd, staged=True)
    if staged is not None:
        return Staged(staged)

    unstaged = _probe(git, cwd, staged=False)
    if unstaged is not None:
        return Unstaged(unstaged)

    return None
