"""Side-effecting last step of each pipeline: create the PR or the commit."""

import logging

from gitlift.core.command_runner import describe_failure
from gitlift.core.errors import GitOperationError, RemoteToolError
from gitlift.core.git.abc import Git
from gitlift.core.github.abc import GitHub
from gitlift.core.github.parsing import parse_pr_number_from_url
from gitlift.core.prompter import Prompter
from gitlift.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


def create_pull_request(
    github: GitHub, feedback: UserFeedback, title: str, body: str, base: str
) -> str:
    """Create a PR from the current branch into base and return its URL.

    Raises:
        RemoteToolError: gh failed, or printed something other than a URL
    """
    feedback.info("Creating GitHub PR...")
    result = github.create_pull_request(title, body, base)
    pr_url = result.stdout.strip()

    if not result.success:
        args = ["gh", "pr", "create", "--base", base, "--title", title, "--body", "<body>"]
        message = describe_failure(args, result, "create pull request")
        raise RemoteToolError(
            f"{message}\nEnsure your branch exists on the remote repository ('origin')."
        )

    if not pr_url.startswith(("http://", "https://")):
        raise RemoteToolError(
            "Failed to parse PR URL from gh output.\n"
            f"gh stdout: {pr_url}\n"
            f"gh stderr: {result.stderr.strip()}"
        )

    feedback.success(f"✓ PR created successfully: {pr_url}")
    return pr_url


def offer_to_open(
    github: GitHub,
    prompter: Prompter,
    feedback: UserFeedback,
    pr_url: str,
    *,
    skip_confirmations: bool,
) -> None:
    """Open the PR in the browser if the operator wants to.

    Never fails the run: any problem is reported as a warning with the URL.
    """
    if not skip_confirmations and not prompter.confirm(
        f"Open PR {pr_url} in browser?", default=True
    ):
        return

    pr_number = parse_pr_number_from_url(pr_url)
    if pr_number is None:
        feedback.warning(f"Could not extract PR number from URL. Please open manually: {pr_url}")
        return

    result = github.browse(pr_number)
    if not result.success:
        logger.debug("gh browse failed: %s", result.stderr.strip())
        feedback.warning(f"Failed to open PR via gh browse. Please open the URL manually: {pr_url}")
        return

    feedback.success("✓ PR opened in browser")


def compose_commit_message(title: str, body: str) -> str:
    """Join title and body with a blank line; a blank body yields the title alone."""
    stripped_body = body.strip()
    if not stripped_body:
        return title
    return f"{title}\n\n{stripped_body}"


def stage_all_changes(git: Git, feedback: UserFeedback) -> None:
    """Stage modified and untracked files with `git add .`.

    Raises:
        GitOperationError: git add failed
    """
    feedback.info("Staging all modified and new files (git add .)...")
    result = git.stage_all()
    if not result.success:
        raise GitOperationError(describe_failure(["git", "add", "."], result, "stage files"))
    feedback.success("✓ All modified and new files staged")


def commit_changes(git: Git, feedback: UserFeedback, message: str) -> None:
    """Commit the index with message.

    Raises:
        GitOperationError: git commit failed
    """
    result = git.commit(message)
    if not result.success:
        raise GitOperationError(
            describe_failure(["git", "commit", "-m", message], result, "create commit")
        )
    feedback.success("✓ Commit successful")
