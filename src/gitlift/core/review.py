"""Interactive review of generated content.

The review loop is a small state machine:

    REVIEWING --confirm--> CONFIRMED     (terminal, yields the artifact)
    REVIEWING --cancel---> CANCELLED     (terminal, yields None)
    REVIEWING --title----> EDITING_TITLE --replace_title--> REVIEWING
    REVIEWING --body-----> EDITING_BODY  --replace_body---> REVIEWING

ReviewSession holds the transitions and nothing else; run_review drives it
from a Prompter and shows the content on every return to REVIEWING.
"""

import logging
from enum import Enum

import click

from gitlift.core.artifacts import ArtifactKind, GeneratedArtifact
from gitlift.core.prompter import Prompter, ReviewAction
from gitlift.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class ReviewState(Enum):
    REVIEWING = "reviewing"
    EDITING_TITLE = "editing_title"
    EDITING_BODY = "editing_body"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


_TRANSITIONS = {
    ReviewAction.CONFIRM: ReviewState.CONFIRMED,
    ReviewAction.CANCEL: ReviewState.CANCELLED,
    ReviewAction.EDIT_TITLE: ReviewState.EDITING_TITLE,
    ReviewAction.EDIT_BODY: ReviewState.EDITING_BODY,
}


class ReviewSession:
    """Mutable review state for one generated artifact."""

    def __init__(self, artifact: GeneratedArtifact) -> None:
        self._artifact = artifact
        self._state = ReviewState.REVIEWING

    @property
    def artifact(self) -> GeneratedArtifact:
        return self._artifact

    @property
    def state(self) -> ReviewState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state in (ReviewState.CONFIRMED, ReviewState.CANCELLED)

    def apply(self, action: ReviewAction) -> ReviewState:
        """Apply an operator action. Only valid while REVIEWING."""
        if self._state is not ReviewState.REVIEWING:
            raise ValueError(f"Cannot apply {action.name} in state {self._state.name}")
        self._state = _TRANSITIONS[action]
        logger.debug("Review: %s -> %s", action.name, self._state.name)
        return self._state

    def replace_title(self, title: str) -> None:
        """Finish a title edit. A blank title keeps the current one."""
        self._require_state(ReviewState.EDITING_TITLE)
        if title.strip():
            self._artifact = self._artifact.with_title(title)
        self._state = ReviewState.REVIEWING

    def replace_body(self, body: str | None) -> None:
        """Finish a body edit. None (editor closed without saving) keeps the body."""
        self._require_state(ReviewState.EDITING_BODY)
        if body is not None:
            self._artifact = self._artifact.with_body(body)
        self._state = ReviewState.REVIEWING

    def result(self) -> GeneratedArtifact | None:
        """The confirmed artifact, or None when cancelled."""
        if not self.is_finished:
            raise ValueError(f"Review is not finished (state {self._state.name})")
        if self._state is ReviewState.CONFIRMED:
            return self._artifact
        return None

    def _require_state(self, expected: ReviewState) -> None:
        if self._state is not expected:
            raise ValueError(f"Expected state {expected.name}, got {self._state.name}")


def run_review(
    artifact: GeneratedArtifact,
    prompter: Prompter,
    feedback: UserFeedback,
    *,
    skip_confirmations: bool,
) -> GeneratedArtifact | None:
    """Let the operator confirm, edit or cancel generated content.

    Returns:
        The (possibly edited) artifact on confirm, None on cancel. With
        skip_confirmations the artifact is returned unchanged without asking.
    """
    if skip_confirmations:
        return artifact

    session = ReviewSession(artifact)
    while not session.is_finished:
        _show(session.artifact, feedback)
        state = session.apply(prompter.choose_review_action())

        if state is ReviewState.EDITING_TITLE:
            new_title = prompter.prompt_text("Enter new title", default=session.artifact.title)
            session.replace_title(new_title)
        elif state is ReviewState.EDITING_BODY:
            edited = prompter.edit_text(session.artifact.body)
            if edited is None:
                feedback.warning("Editor closed without saving. Body unchanged.")
            session.replace_body(edited)

    return session.result()


def _show(artifact: GeneratedArtifact, feedback: UserFeedback) -> None:
    heading = "Pull Request" if artifact.kind is ArtifactKind.PR else "Commit Message"
    feedback.info("")
    feedback.info(click.style(f"--- Generated {heading} ---", bold=True))
    feedback.info(f"{click.style('Title:', bold=True)} {artifact.title}")
    feedback.info(click.style("Body:", bold=True))
    feedback.info(artifact.body if artifact.body.strip() else click.style("(empty)", dim=True))
    feedback.info("")
