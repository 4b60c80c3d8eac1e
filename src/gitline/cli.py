"""Command-line entry point for gitline.

Usage (zsh):
    setopt PROMPT_SUBST
    PROMPT='$(gitline --delimit-non-printable)'

Usage (bash):
    PS1='$(gitline --shell bash --delimit-non-printable)'

Exit Codes:
    0: Prompt written to stdout
    1: Repository metadata could not be read, or an escape was malformed
"""

import logging

import click

from gitline.context import PromptContext, create_context
from gitline.errors import GitlineError
from gitline.prompt import compose_prompt
from gitline.render import DIALECTS

# Extra arguments are ignored so any unrecognized value selects raw mode.
CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    ignore_unknown_options=True,
    allow_extra_args=True,
)


@click.command(name="gitline", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitline")
@click.option(
    "--delimit-non-printable",
    "delimit",
    is_flag=True,
    help="Wrap escape sequences in the shell's zero-width markers.",
)
@click.option(
    "--shell",
    "shell",
    type=click.Choice(sorted(DIALECTS)),
    default="zsh",
    show_default=True,
    help="Shell whose prompt conventions to use.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, delimit: bool, shell: str, debug: bool) -> None:
    """Print a git-aware prompt segment for the current directory."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Tests provide their own context
    if ctx.obj is None:
        ctx.obj = create_context()
    prompt_ctx: PromptContext = ctx.obj

    try:
        prompt = compose_prompt(prompt_ctx, dialect=DIALECTS[shell], delimit=delimit)
    except GitlineError as err:
        click.echo(click.style("Error: ", fg="red") + str(err), err=True)
        raise SystemExit(1) from err

    # The shell captures stdout through a pipe; keep the escapes regardless
    click.echo(prompt, nl=False, color=True)


def main() -> None:
    """CLI entry point used by the `gitline` console script."""
    cli()
