"""Turn fragments into a terminal title and a styled prompt string.

Escape sequences come from `click.style`. For line-editing shells the
styled prompt can additionally have every escape run wrapped in the
shell's zero-width markers, so the shell does not count those bytes
towards the prompt's width:

    zsh:  %{\\x1b[31m%}main
    bash: \\[\\x1b[31m\\]main
"""

from __future__ import annotations

from dataclasses import dataclass

import click

from gitline.errors import MalformedEscapeError
from gitline.tokens import Fragment, Style, plain_text

CSI = "\x1b["
CSI_TERMINATOR = "m"
PROMPT_SUFFIX = "$ "


@dataclass(frozen=True)
class ShellDialect:
    """Shell-specific prompt conventions."""

    name: str
    cwd_placeholder: str
    open_marker: str
    close_marker: str


ZSH = ShellDialect(name="zsh", cwd_placeholder="%~", open_marker="%{", close_marker="%}")
BASH = ShellDialect(name="bash", cwd_placeholder="\\w", open_marker="\\[", close_marker="\\]")

DIALECTS = {dialect.name: dialect for dialect in (ZSH, BASH)}

_STYLE_ATTRS: dict[Style, dict[str, str | bool]] = {
    Style.DEFAULT: {},
    Style.BOLD: {"bold": True},
    Style.RED: {"fg": "red"},
    Style.GREEN_BOLD: {"fg": "green", "bold": True},
    Style.RED_BOLD: {"fg": "red", "bold": True},
    Style.BLUE: {"fg": "blue"},
    Style.DIM: {"dim": True},
}


def style_fragment(fragment: Fragment) -> str:
    """Render one fragment with its escape prelude (and reset, if styled)."""
    attrs = _STYLE_ATTRS[fragment.style]
    if not attrs:
        return fragment.text
    return click.style(fragment.text, **attrs)


def render_title(fragments: list[Fragment]) -> str:
    """Plain title text, with no escape sequences."""
    return plain_text(fragments)


def title_escape(title: str) -> str:
    """OSC 2 sequence that sets the terminal window title."""
    return f"\x1b]2;{title}\x07"


def delimit_non_printable(styled: str, dialect: ShellDialect) -> str:
    """Wrap every `ESC [ ... m` run in the dialect's zero-width markers.

    Text outside escape runs is left untouched, so removing the markers
    again gives back `styled` exactly.

    Raises:
        MalformedEscapeError: If an escape run has no terminating `m`
    """
    head, *runs = styled.split(CSI)
    parts = [head]
    for run in runs:
        end = run.find(CSI_TERMINATOR)
        if end == -1:
            raise MalformedEscapeError(run)
        end += len(CSI_TERMINATOR)
        parts.append(dialect.open_marker + CSI + run[:end] + dialect.close_marker)
        parts.append(run[end:])
    return "".join(parts)


def render_prompt(
    fragments: list[Fragment],
    *,
    runtime_version: str | None,
    at_home: bool,
    supports_title: bool,
    dialect: ShellDialect,
    delimit: bool,
) -> str:
    """Serialize fragments into the final prompt string.

    Order: styled fragments, dimmed runtime version, a space, `$ ` (unless
    at home), then the title escape when the terminal supports it.
    """
    styled = "".join(style_fragment(fragment) for fragment in fragments)
    if runtime_version:
        styled += style_fragment(Fragment(f" {runtime_version}", Style.DIM))
    styled += " "
    if not at_home:
        styled += PROMPT_SUFFIX

    if delimit:
        styled = delimit_non_printable(styled, dialect)

    if supports_title:
        title = title_escape(render_title(fragments))
        if delimit:
            title = dialect.open_marker + title + dialect.close_marker
        styled += title

    return styled
