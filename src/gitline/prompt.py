"""Compose the full prompt for a PromptContext."""

from __future__ import annotations

from gitline.context import PromptContext
from gitline.head import read_head
from gitline.render import ShellDialect, render_prompt
from gitline.repo import locate_repo
from gitline.segment import build_segment, fallback_segment
from gitline.status import probe_change_status
from gitline.tokens import Fragment


def collect_fragments(ctx: PromptContext, dialect: ShellDialect) -> list[Fragment]:
    """Locate the repository around `ctx.cwd` and describe it as fragments."""
    location = locate_repo(ctx.cwd)
    if location is None:
        return fallback_segment(dialect.cwd_placeholder)

    head = read_head(location.git_dir)
    change_status = probe_change_status(ctx.git, ctx.cwd)
    return build_segment(location, head, change_status, ctx.cwd)


def compose_prompt(ctx: PromptContext, *, dialect: ShellDialect, delimit: bool) -> str:
    """Build the prompt string written to stdout.

    Raises:
        GitlineError: On unreadable repository metadata or a malformed escape
    """
    return render_prompt(
        collect_fragments(ctx, dialect),
        runtime_version=ctx.runtime_version,
        at_home=ctx.at_home,
        supports_title=ctx.supports_title,
        dialect=dialect,
        delimit=delimit,
    )
