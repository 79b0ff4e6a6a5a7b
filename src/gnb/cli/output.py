"""Output utilities for CLI commands with clear intent.

user_output() is for human-facing messages and goes to stderr so that stdout
stays clean for anything a script might capture.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a message for the user (stderr)."""
    click.echo(message, nl=nl, err=True)
