"""The two end-to-end pipelines: pull request and commit message.

Each workflow runs its stages strictly in sequence and leaves reporting of
failures to the caller. Operator aborts surface as OperationCancelled.
"""

import logging
from dataclasses import dataclass

from gitlift.core.ai.contexts import CommitContext, PrContext
from gitlift.core.analyzer import analyze_branch, classify_working_tree
from gitlift.core.artifacts import GeneratedArtifact
from gitlift.core.config import ResolvedConfig
from gitlift.core.context import GitLiftContext
from gitlift.core.errors import GitOperationError, OperationCancelled
from gitlift.core.finalizer import (
    commit_changes,
    compose_commit_message,
    create_pull_request,
    offer_to_open,
    stage_all_changes,
)
from gitlift.core.git.types import ChangeSet
from gitlift.core.prerequisites import validate_prerequisites
from gitlift.core.remote_sync import ensure_pushed
from gitlift.core.review import run_review

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrWorkflowResult:
    """Outcome of the PR pipeline.

    Attributes:
        artifact: The reviewed title and body
        pr_url: URL of the created PR, None on a dry run
    """

    artifact: GeneratedArtifact
    pr_url: str | None


def run_pr_workflow(
    ctx: GitLiftContext, config: ResolvedConfig, *, dry_run: bool
) -> PrWorkflowResult:
    """Generate, review and open a pull request for the current branch.

    With dry_run the pipeline stops after review; nothing is created on
    GitHub. The branch is still pushed when needed, since that happens before
    generation.
    """
    skip = config.skip_confirmations

    validate_prerequisites(ctx.runner, ctx.github, ctx.environ)

    comparison = analyze_branch(
        ctx.git, ctx.prompter, ctx.feedback, config.base_branch, skip_confirmations=skip
    )
    ensure_pushed(
        ctx.git, ctx.prompter, ctx.feedback, comparison.current_branch, skip_confirmations=skip
    )

    ctx.feedback.info(
        f"🤖 Generating PR content using {config.model} in {config.language}..."
    )
    artifact = ctx.generator.generate(
        PrContext(diff=comparison.diff, commit_log=comparison.commit_log),
        model=config.model,
        language=config.language,
    )
    ctx.feedback.success("✓ PR content generated")

    reviewed = run_review(artifact, ctx.prompter, ctx.feedback, skip_confirmations=skip)
    if reviewed is None:
        raise OperationCancelled("PR generation cancelled.")

    if dry_run:
        logger.debug("Dry run: skipping PR creation")
        return PrWorkflowResult(artifact=reviewed, pr_url=None)

    pr_url = create_pull_request(
        ctx.github, ctx.feedback, reviewed.title, reviewed.body, comparison.base_branch
    )
    offer_to_open(ctx.github, ctx.prompter, ctx.feedback, pr_url, skip_confirmations=skip)
    return PrWorkflowResult(artifact=reviewed, pr_url=pr_url)


def run_commit_workflow(
    ctx: GitLiftContext, config: ResolvedConfig, *, stage_all: bool
) -> str | None:
    """Generate, review and apply a commit message for the staged changes.

    Args:
        ctx: Application context
        config: Resolved settings
        stage_all: Run `git add .` before reading the staged diff

    Returns:
        The commit message that was committed, or None when there was nothing
        to commit (the reason has been reported through ctx.feedback)

    Raises:
        OperationCancelled: Operator declined staging or cancelled the review
    """
    skip = config.skip_confirmations

    validate_prerequisites(ctx.runner, ctx.github, ctx.environ, require_github=False)

    if stage_all:
        stage_all_changes(ctx.git, ctx.feedback)

    change_set = classify_working_tree(ctx.git)
    staged_diff = change_set.staged_diff

    if not change_set.has_staged_changes:
        if not change_set.has_unstaged_changes:
            ctx.feedback.warning(
                "No staged changes found and no unstaged changes detected. Nothing to commit."
            )
            return None

        _report_unstaged(ctx, change_set)
        if skip:
            ctx.feedback.warning(
                "Aborting: No staged changes, and confirmations are skipped, "
                "so cannot prompt to stage unstaged changes."
            )
            return None

        if not ctx.prompter.confirm(
            "Do you want to stage all these changes and proceed?", default=False
        ):
            raise OperationCancelled(
                "Aborting commit generation as no changes are staged "
                "and user chose not to stage."
            )

        stage_all_changes(ctx.git, ctx.feedback)
        staged_diff = ctx.git.get_staged_diff()
        if not staged_diff:
            raise GitOperationError(
                "Failed to stage changes or no changes to stage after attempting. Aborting."
            )

    ctx.feedback.info(f"🤖 Generating commit message using {config.model}...")
    artifact = ctx.generator.generate(
        CommitContext(staged_diff=staged_diff), model=config.model, language=config.language
    )
    ctx.feedback.success("✓ Commit message generated")

    reviewed = run_review(artifact, ctx.prompter, ctx.feedback, skip_confirmations=skip)
    if reviewed is None:
        raise OperationCancelled("Commit generation cancelled.")

    message = compose_commit_message(reviewed.title, reviewed.body)
    commit_changes(ctx.git, ctx.feedback, message)
    return message


def _report_unstaged(ctx: GitLiftContext, change_set: ChangeSet) -> None:
    ctx.feedback.warning("No staged changes found. However, there are unstaged changes:")
    if change_set.unstaged_modified_paths:
        ctx.feedback.info(f"  Modified: {', '.join(change_set.unstaged_modified_paths)}")
    if change_set.untracked_paths:
        ctx.feedback.info(f"  Untracked: {', '.join(change_set.untracked_paths)}")
