"""Resolve the branch name or detached commit from a HEAD file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gitline.errors import UnreadableHeadError

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "ref: refs/heads/"
REF_PREFIX = "ref:"
SHORT_ID_LENGTH = 7


@dataclass(frozen=True)
class Branch:
    """HEAD points at a symbolic ref."""

    name: str

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Detached:
    """HEAD holds a commit id directly."""

    short_id: str

    @property
    def label(self) -> str:
        return self.short_id


HeadState = Branch | Detached


def parse_head(content: str) -> HeadState:
    """Classify the contents of a HEAD file.

    - `ref: refs/heads/<name>` gives `Branch(<name>)`
    - any other `ref:<ref>` gives `Branch(<ref>)`, e.g. `refs/tags/v1`
    - anything else is a commit id, shortened to its first 7 characters
    """
    content = content.strip()
    if content.startswith(BRANCH_REF_PREFIX):
        return Branch(content[len(BRANCH_REF_PREFIX) :])
    if content.startswith(REF_PREFIX):
        return Branch(content[len(REF_PREFIX) :].lstrip())
    return Detached(content[:SHORT_ID_LENGTH])


def read_head(git_dir: Path) -> HeadState:
    """Read and classify `<git_dir>/HEAD`.

    Raises:
        UnreadableHeadError: If HEAD cannot be opened or is not UTF-8
    """
    head_path = git_dir / "HEAD"
    try:
        content = head_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise UnreadableHeadError(head_path, str(err)) from err

    head = parse_head(content)
    logger.debug("%s resolved to %s", head_path, head)
    return head
