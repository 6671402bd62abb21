"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod

from gitlift.core.command_runner import CommandResult


class GitHub(ABC):
    """Abstract interface for GitHub operations through the gh CLI.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def check_auth_status(self) -> tuple[bool, str | None, str | None]:
        """Check GitHub CLI authentication status.

        Returns:
            Tuple of (is_authenticated, username, hostname)
        """
        ...

    @abstractmethod
    def create_pull_request(self, title: str, body: str, base: str) -> CommandResult:
        """Create a PR from the checked-out branch into base.

        On success gh prints the new PR URL on stdout. The caller validates
        the output and decides what a failure means.
        """
        ...

    @abstractmethod
    def browse(self, target: str) -> CommandResult:
        """Open a repository object (e.g. a PR number) in the web browser."""
        ...
