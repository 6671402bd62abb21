"""Make sure the branch a PR is opened from exists on the remote."""

import logging
from dataclasses import dataclass

from gitlift.core.errors import OperationCancelled
from gitlift.core.git.abc import Git
from gitlift.core.git.types import BranchState
from gitlift.core.prompter import Prompter
from gitlift.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PushPlan:
    """Whether a push is needed, and whether it must create the upstream link."""

    needs_push: bool
    set_upstream: bool


def plan_push(state: BranchState) -> PushPlan:
    """Decide how to bring the remote up to date with the branch.

    A branch without an upstream always needs a push that sets one; the ahead
    count is not consulted in that case.
    """
    if not state.has_upstream:
        return PushPlan(needs_push=True, set_upstream=True)
    return PushPlan(needs_push=state.ahead_count > 0, set_upstream=False)


def ensure_pushed(
    git: Git,
    prompter: Prompter,
    feedback: UserFeedback,
    branch_name: str,
    *,
    skip_confirmations: bool,
) -> None:
    """Push branch_name when the remote is missing it or behind it.

    Raises:
        GitOperationError: The tracking status could not be read
        RemoteToolError: The push failed
        OperationCancelled: Operator declined the push
    """
    feedback.info(f"Checking remote status for branch '{branch_name}'...")
    state = git.get_branch_state()
    plan = plan_push(state)
    logger.debug("Branch state %s -> %s", state, plan)

    if not plan.needs_push:
        feedback.success(f"✓ Branch '{branch_name}' is up to date with remote")
        return

    if plan.set_upstream:
        feedback.warning(f"Branch '{branch_name}' has no upstream branch set.")
    else:
        feedback.warning(
            f"Branch '{branch_name}' is {state.ahead_count} commit(s) ahead of "
            f"'{state.upstream_ref}'."
        )

    if not skip_confirmations:
        confirmed = prompter.confirm(
            f"Branch '{branch_name}' needs to be pushed to the remote. Push now?", default=True
        )
        if not confirmed:
            raise OperationCancelled("Push cancelled by user. Aborting PR creation.")

    feedback.info(f"Pushing branch '{branch_name}'...")
    git.push(branch_name, set_upstream=plan.set_upstream)
    feedback.success("✓ Branch pushed successfully")
