"""Tests for branch analysis and working tree classification."""

from pathlib import Path
from typing import Any

import pytest

from gitlift.core.analyzer import analyze_branch, classify_working_tree, detect_default_base_branch
from gitlift.core.command_runner import CommandResult
from gitlift.core.errors import GitOperationError, OperationCancelled
from gitlift.core.git.fake import FakeGit
from gitlift.core.git.real import RealGit
from gitlift.core.git.types import PorcelainStatus
from tests.fakes.command_runner import FakeCommandRunner
from tests.fakes.prompter import FakePrompter
from tests.fakes.user_feedback import FakeUserFeedback


def _feature_git(**kwargs: Any) -> FakeGit:
    defaults: dict[str, Any] = dict(
        current_branch="feature",
        local_branches={"main", "feature"},
        commits_ahead={"main": 2},
        diffs={"main": "diff --git a/x b/x\n+x\n"},
        commit_logs={"main": "abc123 feat: x\ndef456 fix: y"},
    )
    defaults.update(kwargs)
    return FakeGit(**defaults)


def test_analyze_branch_collects_comparison() -> None:
    feedback = FakeUserFeedback()

    comparison = analyze_branch(
        _feature_git(), FakePrompter(), feedback, "main", skip_confirmations=False
    )

    assert comparison.current_branch == "feature"
    assert comparison.base_branch == "main"
    assert comparison.commit_count == 2
    assert comparison.diff.startswith("diff --git")
    assert comparison.commit_log == "abc123 feat: x\ndef456 fix: y"
    assert feedback.warnings == []


def test_base_branch_missing_everywhere() -> None:
    git = _feature_git(local_branches={"feature"}, remote_branches=set())

    with pytest.raises(GitOperationError) as exc_info:
        analyze_branch(git, FakePrompter(), FakeUserFeedback(), "main", skip_confirmations=True)

    assert exc_info.value.message == "Base branch 'main' not found locally or on remote 'origin'."


def test_base_branch_only_on_remote_compares_remote_ref() -> None:
    """A remote-only base is fetched and compared as origin/<base>."""
    git = _feature_git(
        local_branches={"feature"},
        remote_branches={"main"},
        commits_ahead={"origin/main": 1},
        diffs={"origin/main": "+remote"},
        commit_logs={"origin/main": "abc123 feat: x"},
    )
    feedback = FakeUserFeedback()

    comparison = analyze_branch(git, FakePrompter(), feedback, "main", skip_confirmations=True)

    assert git.fetched_branches == ["main"]
    assert comparison.base_branch == "main"
    assert comparison.commit_count == 1
    assert comparison.diff == "+remote"
    assert any("exists on remote 'origin'" in w for w in feedback.warnings)
    assert "✓ Found 1 commit(s) ahead of 'main'" in feedback.successes


def test_base_branch_only_on_remote_over_real_git() -> None:
    """The git queries use the origin/main..HEAD range, not the bare name."""
    runner = FakeCommandRunner(
        results={
            ("git", "ls-remote", "--heads", "origin", "main"): CommandResult(
                0, "8f3a80\trefs/heads/main\n", ""
            ),
            ("git", "rev-parse", "--abbrev-ref", "HEAD"): CommandResult(0, "feature\n", ""),
            ("git", "rev-list", "--count", "origin/main..HEAD"): CommandResult(0, "1\n", ""),
            ("git", "diff", "origin/main..HEAD"): CommandResult(0, "+x\n", ""),
        }
    )
    git = RealGit(runner, Path("/repo"))

    comparison = analyze_branch(
        git, FakePrompter(), FakeUserFeedback(), "main", skip_confirmations=True
    )

    assert comparison.commit_count == 1
    assert ("git", "fetch", "origin", "main") in runner.commands
    assert ("git", "rev-list", "--count", "main..HEAD") not in runner.commands
    log_command = ("git", "log", "origin/main..HEAD", "--oneline", "--pretty=format:%h %s")
    assert log_command in runner.commands


@pytest.mark.parametrize("branch", ["main", "master", "develop"])
def test_trunk_branch_requires_confirmation(branch: str) -> None:
    """Base branch and conventional trunk names ask before continuing."""
    git = _feature_git(
        current_branch=branch,
        local_branches={"main", "develop"},
        commits_ahead={"develop": 1, "main": 1},
    )
    base = "develop" if branch == "develop" else "main"
    prompter = FakePrompter(confirms=[False])

    with pytest.raises(OperationCancelled):
        analyze_branch(git, prompter, FakeUserFeedback(), base, skip_confirmations=False)

    assert f"'{branch}'" in prompter.confirm_messages[0]


def test_trunk_branch_confirmed_proceeds() -> None:
    git = _feature_git(current_branch="master", commits_ahead={"main": 1})

    comparison = analyze_branch(
        git, FakePrompter(confirms=[True]), FakeUserFeedback(), "main", skip_confirmations=False
    )

    assert comparison.current_branch == "master"


def test_trunk_branch_skip_confirmations_does_not_ask() -> None:
    git = _feature_git(current_branch="main", commits_ahead={"main": 1})

    analyze_branch(git, FakePrompter(), FakeUserFeedback(), "main", skip_confirmations=True)


def test_zero_commits_names_both_branches() -> None:
    git = _feature_git(commits_ahead={"main": 0})

    with pytest.raises(GitOperationError) as exc_info:
        analyze_branch(git, FakePrompter(), FakeUserFeedback(), "main", skip_confirmations=True)

    assert "'feature'" in exc_info.value.message
    assert "'main'" in exc_info.value.message


def test_empty_diff_with_commits_is_a_warning() -> None:
    git = _feature_git(diffs={"main": ""})
    feedback = FakeUserFeedback()

    comparison = analyze_branch(git, FakePrompter(), feedback, "main", skip_confirmations=True)

    assert comparison.diff == ""
    assert any("diff appears empty" in w for w in feedback.warnings)


def test_detached_head() -> None:
    git = _feature_git(current_branch=None)

    with pytest.raises(GitOperationError) as exc_info:
        analyze_branch(git, FakePrompter(), FakeUserFeedback(), "main", skip_confirmations=True)

    assert "detached" in exc_info.value.message


def test_git_query_failure_propagates() -> None:
    git = FakeGit(query_error="fatal: not a git repository")

    with pytest.raises(GitOperationError):
        analyze_branch(git, FakePrompter(), FakeUserFeedback(), "main", skip_confirmations=True)


def test_classify_working_tree() -> None:
    git = FakeGit(
        staged_diff="+staged\n",
        porcelain_status=PorcelainStatus(
            staged_modified_paths=("a.py",),
            unstaged_modified_paths=("a.py", "b.py"),
            untracked_paths=("c.py",),
        ),
    )

    change_set = classify_working_tree(git)

    assert change_set.staged_diff == "+staged"
    assert change_set.has_staged_changes is True
    assert change_set.unstaged_modified_paths == ("a.py", "b.py")
    assert change_set.untracked_paths == ("c.py",)
    assert change_set.has_unstaged_changes is True


def test_classify_clean_tree() -> None:
    change_set = classify_working_tree(FakeGit())

    assert change_set.has_staged_changes is False
    assert change_set.has_unstaged_changes is False


@pytest.mark.parametrize(
    ("remote_branches", "expected"),
    [
        ({"main", "master"}, "main"),
        ({"master", "develop"}, "master"),
        ({"develop"}, "develop"),
        ({"trunk"}, "main"),
        (set(), "main"),
    ],
)
def test_detect_default_base_branch(remote_branches: set[str], expected: str) -> None:
    assert detect_default_base_branch(FakeGit(remote_branches=remote_branches)) == expected
