"""Tests for failure description and the subprocess-backed runner."""

import sys

from gitlift.core.command_runner import (
    COMMAND_NOT_FOUND_EXIT_CODE,
    CommandResult,
    RealCommandRunner,
    describe_failure,
)


def test_describe_failure_includes_context() -> None:
    result = CommandResult(returncode=1, stdout="partial\n", stderr="fatal: rejected\n")

    message = describe_failure(["git", "push"], result, "push branch")

    assert message.splitlines() == [
        "Failed to push branch",
        "Command: git push",
        "Exit code: 1",
        "stdout: partial",
        "stderr: fatal: rejected",
    ]


def test_describe_failure_omits_empty_streams() -> None:
    message = describe_failure(["gh", "browse", "1"], CommandResult(4, "", ""), "open PR")

    assert "stdout" not in message
    assert "stderr" not in message


def test_describe_failure_quotes_arguments() -> None:
    message = describe_failure(
        ["git", "commit", "-m", "feat: two words"], CommandResult(1, "", ""), "create commit"
    )

    assert "Command: git commit -m 'feat: two words'" in message


def test_real_runner_captures_output() -> None:
    result = RealCommandRunner().run([sys.executable, "-c", "print('hi')"])

    assert result.success
    assert result.stdout == "hi\n"


def test_real_runner_missing_executable() -> None:
    """A missing executable is reported, not raised."""
    result = RealCommandRunner().run(["gitlift-definitely-not-installed"])

    assert result.returncode == COMMAND_NOT_FOUND_EXIT_CODE
    assert "gitlift-definitely-not-installed" in result.stderr
