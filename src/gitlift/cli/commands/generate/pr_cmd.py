import click

from gitlift.cli.ensure import handle_workflow_errors
from gitlift.cli.output import machine_output
from gitlift.cli.settings import resolve_run_config
from gitlift.core.config import ConfigOverrides
from gitlift.core.context import GitLiftContext
from gitlift.core.workflows import run_pr_workflow


@click.command("pr")
@click.option("-b", "--base", "base_branch", help="Base branch to compare against.")
@click.option("-m", "--model", help="OpenAI model to use.")
@click.option(
    "-l", "--language", help="Language for the PR content (e.g. english, portuguese)."
)
@click.option("-y", "--yes", is_flag=True, help="Skip all confirmation prompts.")
@click.option("--dry-run", is_flag=True, help="Generate title and body but do not create the PR.")
@click.pass_obj
def generate_pr(
    ctx: GitLiftContext,
    base_branch: str | None,
    model: str | None,
    language: str | None,
    yes: bool,
    dry_run: bool,
) -> None:
    """Generate a pull request title and description with AI.

    Compares the current branch with the base branch, pushes it if the
    remote is behind, lets you review the generated content, then opens
    the PR with the GitHub CLI.

    Examples:

    \b
      # Against the configured base branch
      gitlift generate pr

    \b
      # Preview only, in Portuguese
      gitlift generate pr --dry-run -l portuguese
    """
    feedback = ctx.feedback
    with handle_workflow_errors(feedback):
        config = resolve_run_config(
            ctx,
            ConfigOverrides(
                base_branch=base_branch,
                model=model,
                language=language,
                skip_confirmations=True if yes else None,
            ),
        )

        feedback.info(click.style("🚀 Starting gitlift PR generation...", bold=True))
        if dry_run:
            feedback.warning("Running in dry-run mode. No PR will be created.")

        result = run_pr_workflow(ctx, config, dry_run=dry_run)

    if result.pr_url is None:
        feedback.info(click.style("Dry run results:", bold=True))
        machine_output(f"Title: {result.artifact.title}")
        machine_output("Body:")
        machine_output(result.artifact.body)
        feedback.warning("Exiting due to --dry-run flag. No PR created.")
        return

    machine_output(result.pr_url)
    feedback.success("✨ PR created successfully!")
