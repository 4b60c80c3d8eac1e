"""Exception hierarchy for gitline.

Core modules raise these; only the CLI catches them and turns them into a
diagnostic on stderr with a non-zero exit status.
"""

from pathlib import Path


class GitlineError(Exception):
    """Base error for all fatal gitline conditions."""


class UnexpectedGitEntryError(GitlineError):
    """Raised when a `.git` entry is neither a file nor a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} exists but is neither a file nor a directory")
        self.path = path


class MalformedGitdirPointerError(GitlineError):
    """Raised when a `.git` file does not hold a usable gitdir pointer."""

    def __init__(self, path: Path, content: str) -> None:
        super().__init__(f"{path} does not contain a gitdir pointer: {content!r}")
        self.path = path
        self.content = content


class UnreadableHeadError(GitlineError):
    """Raised when HEAD cannot be opened or decoded as UTF-8."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedEscapeError(GitlineError):
    """Raised when an escape prelude has no terminating byte."""

    def __init__(self, remainder: str) -> None:
        super().__init__(f"Unterminated escape sequence before {remainder!r}")
        self.remainder = remainder


class UnreadableGitdirPointerError(GitlineError):
    """Raised when a `.git` pointer file cannot be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
