import click

from gitlift.cli.ensure import handle_workflow_errors
from gitlift.core.analyzer import detect_default_base_branch
from gitlift.core.config import DEFAULT_CONFIG, ConfigFile
from gitlift.core.context import GitLiftContext
from gitlift.core.errors import PrerequisiteError
from gitlift.core.prerequisites import validate_prerequisites


@click.command("init")
@click.option(
    "-g",
    "--global",
    "global_scope",
    is_flag=True,
    help="Save to ~/.gitlift.toml instead of the current directory.",
)
@click.pass_obj
def init_cmd(ctx: GitLiftContext, global_scope: bool) -> None:
    """Set up gitlift interactively and write a config file."""
    feedback = ctx.feedback
    prompter = ctx.prompter

    feedback.info(click.style("🚀 gitlift setup", bold=True))
    feedback.info(
        click.style("You can exit at any time with Ctrl+C and run 'gitlift init' again.", dim=True)
    )

    feedback.info("")
    feedback.info("📋 Step 1: Checking prerequisites...")
    try:
        validate_prerequisites(ctx.runner, ctx.github, ctx.environ)
    except PrerequisiteError as e:
        feedback.warning(f"⚠️ {e.message}")
        feedback.warning("Setup will continue; fix this before generating content.")
    else:
        feedback.success("✓ git, GitHub CLI and OpenAI API key are ready")

    feedback.info("")
    feedback.info("⚙️ Step 2: gitlift configuration...")
    detected_branch = detect_default_base_branch(ctx.git)
    config = ConfigFile(
        base_branch=prompter.prompt_text("Default base branch for PRs", default=detected_branch),
        model=prompter.prompt_text("Preferred OpenAI model", default=DEFAULT_CONFIG.model),
        language=prompter.prompt_text(
            "Default language for generated content", default=DEFAULT_CONFIG.language
        ),
        skip_confirmations=prompter.confirm(
            "Skip confirmation prompts by default?", default=DEFAULT_CONFIG.skip_confirmations
        ),
    )

    with handle_workflow_errors(feedback):
        path = ctx.config_store.save(config, global_scope=global_scope)

    feedback.success(f"✓ Configuration saved to {path}")
    feedback.info("")
    feedback.info("Next steps:")
    feedback.info("  gitlift generate pr       Create a pull request for the current branch")
    feedback.info("  gitlift generate commit   Write a commit message for staged changes")
