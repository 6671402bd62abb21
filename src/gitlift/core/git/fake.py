"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from gitlift.core.command_runner import CommandResult
from gitlift.core.errors import GitOperationError, RemoteToolError
from gitlift.core.git.abc import Git
from gitlift.core.git.types import BranchState, PorcelainStatus

_OK = CommandResult(returncode=0, stdout="", stderr="")


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Mutating calls are recorded
    for assertions.
    """

    def __init__(
        self,
        *,
        current_branch: str | None = "feature",
        local_branches: set[str] | None = None,
        remote_branches: set[str] | None = None,
        commits_ahead: dict[str, int] | None = None,
        diffs: dict[str, str] | None = None,
        commit_logs: dict[str, str] | None = None,
        branch_state: BranchState | None = None,
        porcelain_status: PorcelainStatus | None = None,
        staged_diff: str = "",
        staged_diff_after_stage_all: str | None = None,
        stage_result: CommandResult | None = None,
        commit_result: CommandResult | None = None,
        push_error: str | None = None,
        query_error: str | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            current_branch: Checked-out branch, None for a detached HEAD
            local_branches: Names `git branch --list` knows about
            remote_branches: Names present on origin (without "origin/")
            commits_ahead: Mapping of base ref -> commit count. A branch only on
                origin is compared as "origin/<name>".
            diffs: Mapping of base ref -> diff text
            commit_logs: Mapping of base ref -> oneline log
            branch_state: Tracking state; defaults to the current branch with
                no upstream
            porcelain_status: Working tree classification
            staged_diff: Staged diff before any stage_all() call
            staged_diff_after_stage_all: Staged diff once stage_all() succeeded
            stage_result: Result returned by stage_all()
            commit_result: Result returned by commit()
            push_error: When set, push() raises RemoteToolError with it
            query_error: When set, every query raises GitOperationError with it
        """
        self._current_branch = current_branch
        self._local_branches = local_branches if local_branches is not None else {"main"}
        self._remote_branches = remote_branches or set()
        self._commits_ahead = commits_ahead or {}
        self._diffs = diffs or {}
        self._commit_logs = commit_logs or {}
        self._branch_state = branch_state or BranchState(
            name=current_branch or "HEAD", upstream_ref=None, ahead_count=0
        )
        self._porcelain_status = porcelain_status or PorcelainStatus()
        self._staged_diff = staged_diff
        self._staged_diff_after_stage_all = staged_diff_after_stage_all
        self._stage_result = stage_result or _OK
        self._commit_result = commit_result or _OK
        self._push_error = push_error
        self._query_error = query_error

        self._stage_all_calls = 0
        self._commits: list[str] = []
        self._pushes: list[tuple[str, bool]] = []
        self._fetched_branches: list[str] = []

    @property
    def stage_all_calls(self) -> int:
        """Number of stage_all() invocations."""
        return self._stage_all_calls

    @property
    def commits(self) -> list[str]:
        """Messages passed to commit(), in call order."""
        return self._commits

    @property
    def pushes(self) -> list[tuple[str, bool]]:
        """List of (branch, set_upstream) tuples passed to push()."""
        return self._pushes

    @property
    def fetched_branches(self) -> list[str]:
        """Branches passed to fetch_remote_branch(), in call order."""
        return self._fetched_branches

    def _check_query(self) -> None:
        if self._query_error is not None:
            raise GitOperationError(self._query_error)

    def local_branch_exists(self, branch: str) -> bool:
        self._check_query()
        return branch in self._local_branches

    def remote_branch_exists(self, branch: str) -> bool:
        return branch in self._remote_branches

    def fetch_remote_branch(self, branch: str) -> str:
        self._check_query()
        self._fetched_branches.append(branch)
        return f"origin/{branch}"

    def get_current_branch(self) -> str | None:
        self._check_query()
        return self._current_branch

    def count_commits_ahead(self, base_ref: str) -> int:
        self._check_query()
        return self._commits_ahead.get(base_ref, 0)

    def get_diff_to_base(self, base_ref: str) -> str:
        self._check_query()
        return self._diffs.get(base_ref, "")

    def get_commit_log(self, base_ref: str) -> str:
        self._check_query()
        return self._commit_logs.get(base_ref, "")

    def get_branch_state(self) -> BranchState:
        self._check_query()
        return self._branch_state

    def get_porcelain_status(self) -> PorcelainStatus:
        self._check_query()
        return self._porcelain_status

    def get_staged_diff(self) -> str:
        self._check_query()
        return self._staged_diff.strip()

    def list_remote_branches(self) -> list[str]:
        return sorted(f"origin/{name}" for name in self._remote_branches)

    def stage_all(self) -> CommandResult:
        self._stage_all_calls += 1
        if self._stage_result.success and self._staged_diff_after_stage_all is not None:
            self._staged_diff = self._staged_diff_after_stage_all
        return self._stage_result

    def commit(self, message: str) -> CommandResult:
        self._commits.append(message)
        return self._commit_result

    def push(self, branch: str, *, set_upstream: bool) -> None:
        self._pushes.append((branch, set_upstream))
        if self._push_error is not None:
            raise RemoteToolError(self._push_error)
