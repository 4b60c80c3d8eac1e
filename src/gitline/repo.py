"""Locate the git repository enclosing a working directory.

The walk is purely lexical: candidates are produced with `Path.parent` and
symlinks are never resolved, so the repository root keeps the same spelling
as the `PWD` it was found from.

For worktrees and submodules, `.git` is a file rather than a directory:

    gitdir: /path/to/main/.git/worktrees/feature

The real metadata directory is read from that pointer, and the repository
that owns it (the "parent" repository) is the directory holding the nearest
`.git` component of the resolved path.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gitline.errors import (
    MalformedGitdirPointerError,
    UnexpectedGitEntryError,
    UnreadableGitdirPointerError,
)

logger = logging.getLogger(__name__)

GIT_ENTRY = ".git"

# Length of the literal "gitdir: " prefix in a gitdir pointer file.
GITDIR_PREFIX_LENGTH = 8


class WalkState(Enum):
    """States of the upward search for a `.git` entry."""

    SEARCHING = "searching"
    FOUND_DIRECT = "found_direct"
    FOUND_LINKED = "found_linked"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class DirectGitDir:
    """Metadata directory living at `<repo>/.git`."""

    path: Path


@dataclass(frozen=True)
class LinkedGitDir:
    """Metadata directory referenced by a `<repo>/.git` pointer file."""

    pointer: Path
    path: Path


GitLocation = DirectGitDir | LinkedGitDir


@dataclass(frozen=True)
class RepoLocation:
    """Result of a successful repository search."""

    root: Path
    git_location: GitLocation
    parent_root: Path | None

    @property
    def git_dir(self) -> Path:
        """Directory that holds HEAD."""
        return self.git_location.path


def probe_candidate(candidate: Path) -> WalkState:
    """Classify a single candidate directory.

    Returns:
        FOUND_DIRECT if `candidate/.git` is a directory, FOUND_LINKED if it
        is a file, SEARCHING if there is no `.git` entry at all.

    Raises:
        UnexpectedGitEntryError: If `.git` is any other kind of entry
    """
    git_path = candidate / GIT_ENTRY
    try:
        mode = git_path.stat().st_mode
    except OSError:
        return WalkState.SEARCHING

    if stat.S_ISDIR(mode):
        return WalkState.FOUND_DIRECT
    if stat.S_ISREG(mode):
        return WalkState.FOUND_LINKED
    raise UnexpectedGitEntryError(git_path)


def read_gitdir_pointer(candidate: Path) -> Path:
    """Resolve the metadata directory named by `candidate/.git`.

    The first eight characters of the file (`gitdir: `) are dropped, the rest
    is stripped and joined onto the candidate. Relative pointers are
    normalized lexically so `..` components disappear.

    Raises:
        UnreadableGitdirPointerError: If the file cannot be read
        MalformedGitdirPointerError: If no path remains after the prefix
    """
    pointer = candidate / GIT_ENTRY
    try:
        content = pointer.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise UnreadableGitdirPointerError(pointer, str(err)) from err
    target = content[GITDIR_PREFIX_LENGTH:].strip()
    if not target:
        raise MalformedGitdirPointerError(pointer, content)
    return Path(os.path.normpath(candidate / target))


def find_parent_repo(git_dir: Path) -> Path | None:
    """Find the repository that owns a linked metadata directory.

    Walks up from `git_dir` itself until a path ending in a `.git` component
    is found, and returns the directory containing that component.

    Example:
        /repo/.git/worktrees/feature -> /repo
        /super/.git/modules/a/modules/b -> /super
    """
    for path in (git_dir, *git_dir.parents):
        if path.name == GIT_ENTRY:
            return path.parent
    return None


def locate_repo(cwd: Path) -> RepoLocation | None:
    """Walk from `cwd` towards the filesystem root looking for `.git`.

    The walk stops at the first candidate holding a `.git` entry, so it takes
    at most one step per component of `cwd`.

    Returns:
        RepoLocation for the enclosing repository, or None if the
        filesystem root was reached without finding one.

    Raises:
        UnexpectedGitEntryError: If a `.git` entry is neither file nor directory
        UnreadableGitdirPointerError: If a `.git` file cannot be read
        MalformedGitdirPointerError: If a `.git` file holds no usable pointer
    """
    candidate = cwd
    state = probe_candidate(candidate)

    while state is WalkState.SEARCHING:
        if candidate.parent == candidate:
            state = WalkState.EXHAUSTED
        else:
            candidate = candidate.parent
            state = probe_candidate(candidate)

    logger.debug("walk from %s ended at %s: %s", cwd, candidate, state.value)

    if state is WalkState.FOUND_DIRECT:
        return RepoLocation(
            root=candidate,
            git_location=DirectGitDir(candidate / GIT_ENTRY),
            parent_root=None,
        )

    if state is WalkState.FOUND_LINKED:
        git_dir = read_gitdir_pointer(candidate)
        parent_root = find_parent_repo(git_dir)
        logger.debug("linked git dir %s, parent repository %s", git_dir, parent_root)
        return RepoLocation(
            root=candidate,
            git_location=LinkedGitDir(pointer=candidate / GIT_ENTRY, path=git_dir),
            parent_root=parent_root,
        )

    return None
