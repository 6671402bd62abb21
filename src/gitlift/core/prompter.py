"""Interactive operator input behind an injectable interface.

Every decision point in the pipeline (trunk-branch confirmation, push
confirmation, staging confirmation, the review loop) asks through a Prompter,
so the whole pipeline can be driven deterministically in tests.
"""

from abc import ABC, abstractmethod
from enum import Enum

import click


class ReviewAction(Enum):
    """Operator choices offered while reviewing generated content."""

    CONFIRM = "confirm"
    EDIT_TITLE = "edit_title"
    EDIT_BODY = "edit_body"
    CANCEL = "cancel"


_ACTION_KEYS = {
    "c": ReviewAction.CONFIRM,
    "t": ReviewAction.EDIT_TITLE,
    "b": ReviewAction.EDIT_BODY,
    "x": ReviewAction.CANCEL,
}


class Prompter(ABC):
    """Abstract source of operator input."""

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def choose_review_action(self) -> ReviewAction:
        """Ask what to do with the content currently under review."""
        ...

    @abstractmethod
    def prompt_text(self, message: str, *, default: str) -> str:
        """Ask for a single line of text, offering a default."""
        ...

    @abstractmethod
    def edit_text(self, text: str) -> str | None:
        """Open text in the operator's editor.

        Returns:
            The edited text, or None if the editor was closed without saving
        """
        ...


class ClickPrompter(Prompter):
    """Production prompter using click prompts and $EDITOR."""

    def confirm(self, message: str, *, default: bool) -> bool:
        return click.confirm(message, default=default, err=True)

    def choose_review_action(self) -> ReviewAction:
        choice = click.prompt(
            "What would you like to do? [c]onfirm, edit [t]itle, edit [b]ody, [x] cancel",
            type=click.Choice(list(_ACTION_KEYS), case_sensitive=False),
            default="c",
            show_choices=False,
            err=True,
        )
        return _ACTION_KEYS[choice.lower()]

    def prompt_text(self, message: str, *, default: str) -> str:
        return click.prompt(message, default=default, err=True)

    def edit_text(self, text: str) -> str | None:
        # require_save: quitting without saving returns None instead of the input
        return click.edit(text, extension=".md", require_save=True)
