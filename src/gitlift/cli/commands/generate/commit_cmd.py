import click

from gitlift.cli.ensure import handle_workflow_errors
from gitlift.cli.settings import resolve_run_config
from gitlift.core.config import ConfigOverrides
from gitlift.core.context import GitLiftContext
from gitlift.core.workflows import run_commit_workflow


@click.command("commit")
@click.option(
    "-a",
    "--all",
    "stage_all",
    is_flag=True,
    help="Stage all modified and new files (git add .) before generating.",
)
@click.option("-m", "--model", help="OpenAI model to use.")
@click.option("-l", "--language", help="Language for the commit message.")
@click.option("-y", "--yes", is_flag=True, help="Skip all confirmation prompts.")
@click.pass_obj
def generate_commit(
    ctx: GitLiftContext,
    stage_all: bool,
    model: str | None,
    language: str | None,
    yes: bool,
) -> None:
    """Generate a commit message for the staged changes with AI."""
    feedback = ctx.feedback
    with handle_workflow_errors(feedback):
        config = resolve_run_config(
            ctx,
            ConfigOverrides(
                model=model,
                language=language,
                skip_confirmations=True if yes else None,
            ),
        )

        feedback.info(click.style("🚀 Starting gitlift commit generation...", bold=True))
        message = run_commit_workflow(ctx, config, stage_all=stage_all)

    if message is not None:
        feedback.success("✨ Commit generated and applied successfully!")
