"""The content a pipeline produces and hands to review and finalization."""

from dataclasses import dataclass, replace
from enum import Enum


class ArtifactKind(Enum):
    PR = "pr"
    COMMIT = "commit"


@dataclass(frozen=True)
class GeneratedArtifact:
    """A title/body pair destined for a pull request or a commit.

    The title must contain non-whitespace text. Length guidance (70 chars for
    PR titles, 72 for commit subjects) is given to the model but not enforced.
    """

    kind: ArtifactKind
    title: str
    body: str

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError(f"{self.kind.value} title must not be empty")

    def with_title(self, title: str) -> "GeneratedArtifact":
        return replace(self, title=title)

    def with_body(self, body: str) -> "GeneratedArtifact":
        return replace(self, body=body)
