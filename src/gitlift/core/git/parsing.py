"""Parsers for git porcelain output.

These are pure functions over command output so the classification rules can
be tested without a repository.
"""

import codecs

from gitlift.core.git.types import BranchState, PorcelainStatus

_BRANCH_HEAD_PREFIX = "# branch.head "
_BRANCH_UPSTREAM_PREFIX = "# branch.upstream "
_BRANCH_AB_PREFIX = "# branch.ab "

_RENAME_SEPARATOR = " -> "


def parse_branch_status(output: str) -> BranchState:
    """Parse the header of `git status --porcelain=v2 --branch`.

    Relevant header lines:
        # branch.head feature
        # branch.upstream origin/feature
        # branch.ab +2 -0

    git omits branch.upstream when the branch tracks nothing, and omits
    branch.ab when the upstream ref is gone; ahead_count is 0 in both cases.

    Args:
        output: Raw command output

    Returns:
        BranchState for the checked-out branch
    """
    name = ""
    upstream: str | None = None
    ahead = 0

    for line in output.splitlines():
        if line.startswith(_BRANCH_HEAD_PREFIX):
            name = line[len(_BRANCH_HEAD_PREFIX) :].strip()
        elif line.startswith(_BRANCH_UPSTREAM_PREFIX):
            upstream = line[len(_BRANCH_UPSTREAM_PREFIX) :].strip() or None
        elif line.startswith(_BRANCH_AB_PREFIX):
            counts = line[len(_BRANCH_AB_PREFIX) :].split()
            if counts:
                ahead = int(counts[0].lstrip("+"))

    return BranchState(name=name, upstream_ref=upstream, ahead_count=ahead)


def parse_porcelain_status(output: str) -> PorcelainStatus:
    """Classify entries of `git status --porcelain` (v1).

    Each entry is "XY PATH": X is the index (staged) column, Y the worktree
    (unstaged) column. Columns are read independently:

    - X == "M": staged-modified, whatever Y is
    - Y == "M": unstaged-modified, whatever X is ("MM" lands in both)
    - "??": untracked, never in the other two

    Lines are not stripped before reading the columns; a leading space is a
    meaningful (empty) X column.

    Args:
        output: Raw command output

    Returns:
        PorcelainStatus with paths in the order git reported them
    """
    staged: list[str] = []
    unstaged: list[str] = []
    untracked: list[str] = []

    for line in output.splitlines():
        if len(line) < 4:
            continue

        index_status = line[0]
        worktree_status = line[1]
        path = _entry_path(line[3:])

        if index_status == "?" and worktree_status == "?":
            untracked.append(path)
            continue

        if index_status == "M":
            staged.append(path)
        if worktree_status == "M":
            unstaged.append(path)

    return PorcelainStatus(
        staged_modified_paths=tuple(staged),
        unstaged_modified_paths=tuple(unstaged),
        untracked_paths=tuple(untracked),
    )


def _entry_path(raw: str) -> str:
    """Extract the current path from a porcelain entry.

    Renames and copies are reported as "ORIG -> PATH"; the new path is what
    the working tree holds now.
    """
    if _RENAME_SEPARATOR in raw:
        raw = raw.split(_RENAME_SEPARATOR, 1)[1]
    return unquote_path(raw)


def unquote_path(raw: str) -> str:
    """Undo git's C-style quoting of unusual paths.

    git wraps paths containing spaces, quotes or non-ASCII bytes in double
    quotes and escapes them ("caf\\303\\251.txt" -> "café.txt").
    """
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        unescaped = codecs.escape_decode(raw[1:-1].encode("ascii", "backslashreplace"))[0]
        return unescaped.decode("utf-8", errors="replace")
    return raw


def parse_remote_branches(output: str) -> list[str]:
    """Parse `git branch -r --format=%(refname:short)` into branch names."""
    return [line.strip() for line in output.splitlines() if line.strip()]

