"""AI generation commands."""

import click

from gitlift.cli.commands.generate.commit_cmd import generate_commit
from gitlift.cli.commands.generate.pr_cmd import generate_pr


@click.group("generate")
def generate_group() -> None:
    """Generate pull request descriptions and commit messages."""
    pass


generate_group.add_command(generate_pr)
generate_group.add_command(generate_commit)
