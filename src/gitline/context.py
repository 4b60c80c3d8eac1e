"""PromptContext - everything gitline reads from its environment, read once."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitline.gateway.git.abc import GitDiff
from gitline.gateway.git.real import RealGitDiff

RUNTIME_VERSION_ENV = "GITLINE_RUNTIME_VERSION"

# TERM prefixes of terminals that understand the OSC 2 title escape.
TITLE_TERM_PREFIXES = ("xterm", "rxvt")


@dataclass(frozen=True)
class PromptContext:
    """Context container for a single prompt render.

    Environment values and the git gateway are captured here at startup so
    that no component queries process state on its own.
    """

    cwd: Path
    home: Path | None
    term: str
    runtime_version: str | None
    git: GitDiff

    @property
    def at_home(self) -> bool:
        return self.home is not None and self.home == self.cwd

    @property
    def supports_title(self) -> bool:
        return self.term.startswith(TITLE_TERM_PREFIXES)


def _home_dir(environ: Mapping[str, str]) -> Path | None:
    home = environ.get("HOME")
    if home:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError:
        return None


def create_context(
    environ: Mapping[str, str] | None = None,
    *,
    git: GitDiff | None = None,
) -> PromptContext:
    """Create a PromptContext from environment variables.

    Args:
        environ: Environment mapping, `os.environ` if None
        git: Git gateway, `RealGitDiff` if None

    Returns:
        PromptContext configured from `PWD`, `HOME`, `TERM` and
        `GITLINE_RUNTIME_VERSION`
    """
    if environ is None:
        environ = os.environ

    pwd = environ.get("PWD")
    cwd = Path(pwd) if pwd else Path(os.getcwd())

    return PromptContext(
        cwd=cwd,
        home=_home_dir(environ),
        term=environ.get("TERM", ""),
        runtime_version=environ.get(RUNTIME_VERSION_ENV) or None,
        git=git if git is not None else RealGitDiff(),
    )
