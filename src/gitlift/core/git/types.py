"""Value types describing git state."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BranchState:
    """Tracking state of the checked-out branch.

    Attributes:
        name: Branch name as reported by git
        upstream_ref: Upstream ref (e.g. "origin/feature"), None if not tracking
        ahead_count: Commits not yet on the upstream. Only meaningful when the
            branch has an upstream.
    """

    name: str
    upstream_ref: str | None
    ahead_count: int

    def __post_init__(self) -> None:
        if self.ahead_count < 0:
            raise ValueError(f"ahead_count must be non-negative, got {self.ahead_count}")

    @property
    def has_upstream(self) -> bool:
        return self.upstream_ref is not None


@dataclass(frozen=True)
class PorcelainStatus:
    """Per-file status classification from `git status --porcelain`.

    A path can appear in both staged_modified_paths and
    unstaged_modified_paths (status "MM": edited again after staging).
    untracked_paths is disjoint from both.
    """

    staged_modified_paths: tuple[str, ...] = ()
    unstaged_modified_paths: tuple[str, ...] = ()
    untracked_paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChangeSet:
    """Working tree snapshot used by the commit pipeline."""

    staged_diff: str
    unstaged_modified_paths: tuple[str, ...]
    untracked_paths: tuple[str, ...]

    @property
    def has_staged_changes(self) -> bool:
        return bool(self.staged_diff.strip())

    @property
    def has_unstaged_changes(self) -> bool:
        return bool(self.unstaged_modified_paths or self.untracked_paths)


@dataclass(frozen=True)
class BranchComparison:
    """What the current branch adds on top of the base branch."""

    current_branch: str
    base_branch: str
    commit_count: int
    diff: str
    commit_log: str
