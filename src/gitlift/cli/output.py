"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr; machine_output() is for
results other programs may consume (the PR URL, dry-run content) and goes to
stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write a result to stdout."""
    click.echo(message, nl=nl)
