import logging
import os

import click

from gitlift.cli.commands.generate import generate_group
from gitlift.cli.commands.init import init_cmd
from gitlift.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "GITLIFT_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitlift")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Generate pull requests and commit messages with AI."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(generate_group)
cli.add_command(init_cmd)


def main() -> None:
    """CLI entry point used by the `gitlift` console script."""
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    cli()
