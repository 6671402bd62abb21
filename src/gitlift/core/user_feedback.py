"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from gitlift.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output for pipeline stages.

    Core code never prints directly; it calls the feedback sink held by the
    context. This keeps stages silent in tests and lets the CLI decide how
    messages look.

    Usage:
        ctx.feedback.info("Checking remote status...")
        ctx.feedback.success("✓ Branch pushed")
        ctx.feedback.warning("Base branch only exists on origin")
        ctx.feedback.error("Error: push failed")

    InteractiveFeedback writes everything to stderr, styled by level.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))

