"""Fake ContentGenerator returning canned artifacts."""

from gitlift.core.ai.contexts import GenerationContext
from gitlift.core.ai.generator import ContentGenerator
from gitlift.core.artifacts import GeneratedArtifact
from gitlift.core.errors import GitLiftError


class FakeContentGenerator(ContentGenerator):
    """Returns a fixed title/body for whatever kind is requested.

    Args:
        title: Title of every generated artifact
        body: Body of every generated artifact
        error: Raised from generate() instead of returning, when set
    """

    def __init__(
        self,
        *,
        title: str = "feat: add widget",
        body: str = "- add widget",
        error: GitLiftError | None = None,
    ) -> None:
        self._title = title
        self._body = body
        self._error = error
        self.requests: list[tuple[GenerationContext, str, str]] = []

    def generate(
        self, context: GenerationContext, *, model: str, language: str
    ) -> GeneratedArtifact:
        self.requests.append((context, model, language))
        if self._error is not None:
            raise self._error
        return GeneratedArtifact(kind=context.kind, title=self._title, body=self._body)
