"""Tests for push planning and the push coordinator."""

import pytest

from gitlift.core.errors import OperationCancelled, RemoteToolError
from gitlift.core.git.fake import FakeGit
from gitlift.core.git.types import BranchState
from gitlift.core.remote_sync import PushPlan, ensure_pushed, plan_push
from tests.fakes.prompter import FakePrompter
from tests.fakes.user_feedback import FakeUserFeedback

NO_UPSTREAM = BranchState(name="feature", upstream_ref=None, ahead_count=0)
AHEAD = BranchState(name="feature", upstream_ref="origin/feature", ahead_count=2)
IN_SYNC = BranchState(name="feature", upstream_ref="origin/feature", ahead_count=0)


@pytest.mark.parametrize("ahead_count", [0, 5])
def test_no_upstream_always_pushes_with_upstream(ahead_count: int) -> None:
    """The ahead count is ignored when there is no upstream."""
    state = BranchState(name="feature", upstream_ref=None, ahead_count=ahead_count)

    assert plan_push(state) == PushPlan(needs_push=True, set_upstream=True)


def test_ahead_of_upstream_plain_push() -> None:
    assert plan_push(AHEAD) == PushPlan(needs_push=True, set_upstream=False)


def test_in_sync_no_push() -> None:
    assert plan_push(IN_SYNC) == PushPlan(needs_push=False, set_upstream=False)


def test_negative_ahead_count_rejected() -> None:
    with pytest.raises(ValueError):
        BranchState(name="feature", upstream_ref="origin/feature", ahead_count=-1)


def test_in_sync_does_nothing() -> None:
    git = FakeGit(branch_state=IN_SYNC)

    ensure_pushed(git, FakePrompter(), FakeUserFeedback(), "feature", skip_confirmations=False)

    assert git.pushes == []


def test_confirmed_push_sets_upstream() -> None:
    git = FakeGit(branch_state=NO_UPSTREAM)
    prompter = FakePrompter(confirms=[True])

    ensure_pushed(git, prompter, FakeUserFeedback(), "feature", skip_confirmations=False)

    assert git.pushes == [("feature", True)]
    assert "needs to be pushed" in prompter.confirm_messages[0]


def test_skip_confirmations_pushes_without_asking() -> None:
    git = FakeGit(branch_state=AHEAD)

    ensure_pushed(git, FakePrompter(), FakeUserFeedback(), "feature", skip_confirmations=True)

    assert git.pushes == [("feature", False)]


def test_declined_push_cancels() -> None:
    git = FakeGit(branch_state=AHEAD)

    with pytest.raises(OperationCancelled) as exc_info:
        ensure_pushed(
            git,
            FakePrompter(confirms=[False]),
            FakeUserFeedback(),
            "feature",
            skip_confirmations=False,
        )

    assert exc_info.value.message == "Push cancelled by user. Aborting PR creation."
    assert git.pushes == []


def test_push_failure_propagates() -> None:
    git = FakeGit(branch_state=NO_UPSTREAM, push_error="push rejected")
    feedback = FakeUserFeedback()

    with pytest.raises(RemoteToolError) as exc_info:
        ensure_pushed(git, FakePrompter(), feedback, "feature", skip_confirmations=True)

    assert exc_info.value.message == "push rejected"
    assert "✓ Branch pushed successfully" not in feedback.successes
