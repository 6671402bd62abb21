"""Inputs to content generation, one type per artifact kind."""

from dataclasses import dataclass
from typing import ClassVar

from gitlift.core.artifacts import ArtifactKind


@dataclass(frozen=True)
class PrContext:
    """Branch changes a pull request description is written from."""

    kind: ClassVar[ArtifactKind] = ArtifactKind.PR

    diff: str
    commit_log: str


@dataclass(frozen=True)
class CommitContext:
    """Staged changes a commit message is written from."""

    kind: ClassVar[ArtifactKind] = ArtifactKind.COMMIT

    staged_diff: str


GenerationContext = PrContext | CommitContext
