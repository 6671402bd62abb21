"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
pipeline stages testable without a repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation on top of a CommandRunner
- FakeGit: In-memory implementation for tests

Contract:
- Queries raise GitOperationError when git itself fails (not a repository,
  bad revision, ...), with the command and captured stderr in the message.
- Mutations (stage, commit) return the CommandResult; the caller decides
  which error category a failure belongs to. push() raises RemoteToolError
  itself, since only the implementation knows the command it ran.
"""

from abc import ABC, abstractmethod

from gitlift.core.command_runner import CommandResult
from gitlift.core.git.types import BranchState, PorcelainStatus


class Git(ABC):
    """Abstract interface for git operations on one working copy.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def local_branch_exists(self, branch: str) -> bool:
        """Check whether a local branch exists (`git branch --list`)."""
        ...

    @abstractmethod
    def remote_branch_exists(self, branch: str) -> bool:
        """Check whether a branch exists on origin (`git ls-remote --heads`).

        Returns False when the remote cannot be queried.
        """
        ...

    @abstractmethod
    def fetch_remote_branch(self, branch: str) -> str:
        """Fetch branch from origin and return its remote-tracking ref.

        The returned ref (e.g. "origin/main") can be used in revision ranges
        when the branch has no local counterpart.
        """
        ...

    @abstractmethod
    def get_current_branch(self) -> str | None:
        """Get the checked-out branch name, or None on a detached HEAD."""
        ...

    @abstractmethod
    def count_commits_ahead(self, base_ref: str) -> int:
        """Count commits reachable from HEAD but not from base_ref."""
        ...

    @abstractmethod
    def get_diff_to_base(self, base_ref: str) -> str:
        """Get the unified diff of base_ref..HEAD."""
        ...

    @abstractmethod
    def get_commit_log(self, base_ref: str) -> str:
        """Get one "<short-sha> <subject>" line per commit in base_ref..HEAD."""
        ...

    @abstractmethod
    def get_branch_state(self) -> BranchState:
        """Get upstream tracking state of the checked-out branch."""
        ...

    @abstractmethod
    def get_porcelain_status(self) -> PorcelainStatus:
        """Get per-file staged/unstaged/untracked classification."""
        ...

    @abstractmethod
    def get_staged_diff(self) -> str:
        """Get the diff of the index against HEAD.

        Returns:
            Diff text with surrounding whitespace stripped; empty when
            nothing is staged
        """
        ...

    @abstractmethod
    def list_remote_branches(self) -> list[str]:
        """List remote branches as "origin/name". Empty list on failure."""
        ...

    @abstractmethod
    def stage_all(self) -> CommandResult:
        """Stage all modified and untracked files (`git add .`)."""
        ...

    @abstractmethod
    def commit(self, message: str) -> CommandResult:
        """Commit the index with the exact given message."""
        ...

    @abstractmethod
    def push(self, branch: str, *, set_upstream: bool) -> None:
        """Push the branch, creating the origin tracking link if requested.

        Raises:
            RemoteToolError: The push failed; the message names the command
                and carries git's stderr
        """
        ...
