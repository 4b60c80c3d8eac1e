"""gitline - a git-aware shell prompt segment.

See `gitline --help` for details.
"""

from gitline.cli import cli, main

__all__ = ["cli", "main"]
