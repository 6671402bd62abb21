"""Production Git implementation using a CommandRunner.

This module provides the real Git implementation that executes actual git
commands in the working copy the CLI was started from.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from gitlift.core.command_runner import CommandResult, CommandRunner, describe_failure
from gitlift.core.errors import GitOperationError, RemoteToolError
from gitlift.core.git.abc import Git
from gitlift.core.git.parsing import (
    parse_branch_status,
    parse_porcelain_status,
    parse_remote_branches,
)
from gitlift.core.git.types import BranchState, PorcelainStatus

logger = logging.getLogger(__name__)

REMOTE_NAME = "origin"


class RealGit(Git):
    """Production implementation running git through a CommandRunner."""

    def __init__(self, runner: CommandRunner, cwd: Path) -> None:
        self._runner = runner
        self._cwd = cwd

    def _run(self, args: Sequence[str]) -> CommandResult:
        return self._runner.run(["git", *args], cwd=self._cwd)

    def _run_checked(self, args: Sequence[str], operation: str) -> str:
        """Run a git query, raising GitOperationError with context on failure."""
        result = self._run(args)
        if not result.success:
            raise GitOperationError(describe_failure(["git", *args], result, operation))
        return result.stdout

    def local_branch_exists(self, branch: str) -> bool:
        output = self._run_checked(["branch", "--list", branch], f"list local branch '{branch}'")
        return bool(output.strip())

    def remote_branch_exists(self, branch: str) -> bool:
        result = self._run(["ls-remote", "--heads", REMOTE_NAME, branch])
        if not result.success:
            logger.debug("ls-remote failed for %s: %s", branch, result.stderr.strip())
            return False
        return bool(result.stdout.strip())

    def fetch_remote_branch(self, branch: str) -> str:
        self._run_checked(["fetch", REMOTE_NAME, branch], f"fetch '{branch}' from {REMOTE_NAME}")
        return f"{REMOTE_NAME}/{branch}"

    def get_current_branch(self) -> str | None:
        output = self._run_checked(["rev-parse", "--abbrev-ref", "HEAD"], "resolve current branch")
        branch = output.strip()
        if branch == "HEAD":
            return None
        return branch

    def count_commits_ahead(self, base_ref: str) -> int:
        output = self._run_checked(
            ["rev-list", "--count", f"{base_ref}..HEAD"],
            f"count commits ahead of '{base_ref}'",
        )
        count_str = output.strip()
        if not count_str.isdigit():
            raise GitOperationError(
                f"Unexpected output from git rev-list --count: {count_str!r}"
            )
        return int(count_str)

    def get_diff_to_base(self, base_ref: str) -> str:
        return self._run_checked(
            ["diff", f"{base_ref}..HEAD"], f"compute diff against '{base_ref}'"
        )

    def get_commit_log(self, base_ref: str) -> str:
        output = self._run_checked(
            ["log", f"{base_ref}..HEAD", "--oneline", "--pretty=format:%h %s"],
            f"read commit log against '{base_ref}'",
        )
        return output.strip()

    def get_branch_state(self) -> BranchState:
        output = self._run_checked(
            ["status", "--porcelain=v2", "--branch"], "read branch tracking status"
        )
        return parse_branch_status(output)

    def get_porcelain_status(self) -> PorcelainStatus:
        output = self._run_checked(["status", "--porcelain"], "read working tree status")
        return parse_porcelain_status(output)

    def get_staged_diff(self) -> str:
        return self._run_checked(["diff", "--staged"], "read staged diff").strip()

    def list_remote_branches(self) -> list[str]:
        result = self._run(["branch", "-r", "--format=%(refname:short)"])
        if not result.success:
            return []
        return parse_remote_branches(result.stdout)

    def stage_all(self) -> CommandResult:
        return self._run(["add", "."])

    def commit(self, message: str) -> CommandResult:
        return self._run(["commit", "-m", message])

    def push(self, branch: str, *, set_upstream: bool) -> None:
        args = ["push", "--set-upstream", REMOTE_NAME, branch] if set_upstream else ["push"]
        result = self._run(args)
        if not result.success:
            raise RemoteToolError(
                describe_failure(["git", *args], result, "push branch to remote")
            )
