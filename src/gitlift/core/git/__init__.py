from gitlift.core.git.abc import Git
from gitlift.core.git.fake import FakeGit
from gitlift.core.git.real import RealGit
from gitlift.core.git.types import BranchComparison, BranchState, ChangeSet, PorcelainStatus

__all__ = [
    "BranchComparison",
    "BranchState",
    "ChangeSet",
    "FakeGit",
    "Git",
    "PorcelainStatus",
    "RealGit",
]
