"""Derive what the current branch or working tree has to offer for generation."""

import logging

from gitlift.core.errors import GitOperationError, OperationCancelled
from gitlift.core.git.abc import Git
from gitlift.core.git.types import BranchComparison, ChangeSet
from gitlift.core.prompter import Prompter
from gitlift.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

TRUNK_BRANCH_NAMES = ("main", "master")

# Remote branch -> base branch suggested by `gitlift init`, first match wins
_DEFAULT_BASE_CANDIDATES = (
    ("origin/main", "main"),
    ("origin/master", "master"),
    ("origin/develop", "develop"),
)
FALLBACK_BASE_BRANCH = "main"


def analyze_branch(
    git: Git,
    prompter: Prompter,
    feedback: UserFeedback,
    base_branch: str,
    *,
    skip_confirmations: bool,
) -> BranchComparison:
    """Compare the checked-out branch against base_branch.

    Validates that base_branch exists locally, or only on origin with a
    warning (it is then fetched and compared as origin/<base_branch>). Guards
    against generating from a trunk branch, then collects the diff and oneline
    log of the base..HEAD range.

    Raises:
        GitOperationError: Base branch missing, detached HEAD, no commits
            ahead of the base, or a failing git query
        OperationCancelled: Operator declined to continue on a trunk branch
    """
    base_ref = _resolve_base_ref(git, feedback, base_branch)

    current_branch = git.get_current_branch()
    if current_branch is None:
        raise GitOperationError(
            "HEAD is detached. Check out the branch you want to generate from."
        )
    feedback.info(f"Current branch: {current_branch}")

    if not skip_confirmations and _is_trunk(current_branch, base_branch):
        proceed = prompter.confirm(
            f"🚨 You are on the '{current_branch}' branch. Continue anyway?", default=False
        )
        if not proceed:
            raise OperationCancelled("Operation cancelled by user.")

    commit_count = git.count_commits_ahead(base_ref)
    logger.debug("%s is %d commit(s) ahead of %s", current_branch, commit_count, base_branch)
    if commit_count == 0:
        raise GitOperationError(
            f"No commits found on branch '{current_branch}' ahead of '{base_branch}'. "
            "Nothing to generate from."
        )
    feedback.success(f"✓ Found {commit_count} commit(s) ahead of '{base_branch}'")

    diff = git.get_diff_to_base(base_ref)
    if not diff.strip():
        feedback.warning("Warning: Commits found, but the diff appears empty. Proceeding anyway.")

    commit_log = git.get_commit_log(base_ref)

    return BranchComparison(
        current_branch=current_branch,
        base_branch=base_branch,
        commit_count=commit_count,
        diff=diff,
        commit_log=commit_log,
    )


def _resolve_base_ref(git: Git, feedback: UserFeedback, base_branch: str) -> str:
    """Return the revision to compare HEAD against for base_branch."""
    if git.local_branch_exists(base_branch):
        logger.debug("Base branch %s found locally", base_branch)
        return base_branch

    if not git.remote_branch_exists(base_branch):
        raise GitOperationError(
            f"Base branch '{base_branch}' not found locally or on remote 'origin'."
        )

    feedback.warning(
        f"Base branch '{base_branch}' not found locally, but exists on remote 'origin'. "
        "Proceeding..."
    )
    base_ref = git.fetch_remote_branch(base_branch)
    logger.debug("Comparing against remote-tracking ref %s", base_ref)
    return base_ref


def _is_trunk(current_branch: str, base_branch: str) -> bool:
    return current_branch == base_branch or current_branch in TRUNK_BRANCH_NAMES


def classify_working_tree(git: Git) -> ChangeSet:
    """Snapshot the staged diff and the files that are not staged yet."""
    staged_diff = git.get_staged_diff()
    status = git.get_porcelain_status()
    change_set = ChangeSet(
        staged_diff=staged_diff,
        unstaged_modified_paths=status.unstaged_modified_paths,
        untracked_paths=status.untracked_paths,
    )
    logger.debug(
        "Working tree: staged=%s unstaged=%d untracked=%d",
        change_set.has_staged_changes,
        len(change_set.unstaged_modified_paths),
        len(change_set.untracked_paths),
    )
    return change_set


def detect_default_base_branch(git: Git) -> str:
    """Suggest a base branch from the branches present on origin."""
    remote_branches = set(git.list_remote_branches())
    for remote_branch, base_branch in _DEFAULT_BASE_CANDIDATES:
        if remote_branch in remote_branches:
            return base_branch
    return FALLBACK_BASE_BRANCH
