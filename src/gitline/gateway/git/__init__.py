"""Git diff gateway."""

from gitline.gateway.git.abc import GitDiff
from gitline.gateway.git.fake import FakeGitDiff
from gitline.gateway.git.real import RealGitDiff

__all__ = [
    "GitDiff",
    "RealGitDiff",
    "FakeGitDiff",
]
