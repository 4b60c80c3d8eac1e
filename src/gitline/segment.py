"""Assemble the ordered fragments describing a repository."""

from __future__ import annotations

from pathlib import Path

from gitline.head import HeadState
from gitline.repo import RepoLocation
from gitline.status import ChangeStatus, Staged, Unstaged
from gitline.tokens import Fragment, Style

DEFAULT_BRANCH = "master"


def fallback_segment(cwd_placeholder: str) -> list[Fragment]:
    """Fragments shown outside any repository: the shell's own cwd expansion."""
    return [Fragment(cwd_placeholder, Style.BLUE)]


def build_segment(
    location: RepoLocation,
    head: HeadState,
    change_status: ChangeStatus | None,
    cwd: Path,
) -> list[Fragment]:
    """Build the fragments for a located repository.

    Layout: `[parent/]repo[:branch][+N|*N][/relative/cwd]`
    """
    fragments: list[Fragment] = []

    if location.parent_root is not None and location.parent_root.name:
        fragments.append(Fragment(location.parent_root.name, Style.BOLD))
        fragments.append(Fragment("/"))

    if location.root.name:
        fragments.append(Fragment(location.root.name))

    if head.label != DEFAULT_BRANCH:
        fragments.append(Fragment(":"))
        fragments.append(Fragment(head.label, Style.RED))

    if isinstance(change_status, Staged):
        fragments.append(Fragment("+", Style.GREEN_BOLD))
        fragments.append(Fragment(str(change_status.count), Style.GREEN_BOLD))
    elif isinstance(change_status, Unstaged):
        fragments.append(Fragment("*", Style.RED_BOLD))
        fragments.append(Fragment(str(change_status.count), Style.RED_BOLD))

    if cwd != location.root:
        fragments.append(Fragment("/", Style.BLUE))
        fragments.append(Fragment(cwd.relative_to(location.root).as_posix()))

    return fragments
