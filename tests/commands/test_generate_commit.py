"""Tests for `gitlift generate commit`."""

from click.testing import CliRunner

from gitlift.cli.cli import cli
from gitlift.core.git.fake import FakeGit
from gitlift.core.git.types import PorcelainStatus
from gitlift.core.prompter import ReviewAction
from tests.fakes.context import create_test_context
from tests.fakes.prompter import FakePrompter
from tests.fakes.user_feedback import FakeUserFeedback


def test_generate_commit_commits_staged_changes() -> None:
    git = FakeGit(staged_diff="+widget")
    feedback = FakeUserFeedback()
    prompter = FakePrompter(review_actions=[ReviewAction.CONFIRM])
    ctx = create_test_context(git=git, prompter=prompter, feedback=feedback)

    result = CliRunner().invoke(cli, ["generate", "commit"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.commits == ["feat: add widget\n\n- add widget"]
    assert "✨ Commit generated and applied successfully!" in feedback.successes


def test_generate_commit_all_with_yes() -> None:
    git = FakeGit(
        porcelain_status=PorcelainStatus(untracked_paths=("new.py",)),
        staged_diff_after_stage_all="+new",
    )
    ctx = create_test_context(git=git)

    result = CliRunner().invoke(cli, ["generate", "commit", "--all", "--yes"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.stage_all_calls == 1
    assert len(git.commits) == 1


def test_generate_commit_nothing_to_commit_exits_0() -> None:
    feedback = FakeUserFeedback()
    ctx = create_test_context(git=FakeGit(), feedback=feedback)

    result = CliRunner().invoke(cli, ["generate", "commit", "-y"], obj=ctx)

    assert result.exit_code == 0
    assert feedback.errors == []
    assert not any("successfully" in s for s in feedback.successes)


def test_generate_commit_declined_staging_exits_0() -> None:
    git = FakeGit(porcelain_status=PorcelainStatus(unstaged_modified_paths=("a.py",)))
    feedback = FakeUserFeedback()
    ctx = create_test_context(git=git, prompter=FakePrompter(confirms=[False]), feedback=feedback)

    result = CliRunner().invoke(cli, ["generate", "commit"], obj=ctx)

    assert result.exit_code == 0
    assert git.commits == []
    assert any("chose not to stage" in w for w in feedback.warnings)


def test_generate_commit_git_failure_exits_1() -> None:
    feedback = FakeUserFeedback()
    ctx = create_test_context(git=FakeGit(query_error="not a git repository"), feedback=feedback)

    result = CliRunner().invoke(cli, ["generate", "commit", "-y"], obj=ctx)

    assert result.exit_code == 1
    assert feedback.errors == ["Error: not a git repository"]
