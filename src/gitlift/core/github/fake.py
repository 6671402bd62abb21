"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from gitlift.core.command_runner import CommandResult
from gitlift.core.github.abc import GitHub


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        authenticated: bool = True,
        username: str | None = "octocat",
        pr_url: str = "https://github.com/owner/repo/pull/1",
        create_result: CommandResult | None = None,
        browse_result: CommandResult | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            authenticated: Result of check_auth_status()
            username: Reported username when authenticated
            pr_url: URL printed by a successful create_pull_request()
            create_result: Overrides the create_pull_request() result entirely
            browse_result: Result of browse(); succeeds by default
        """
        self._authenticated = authenticated
        self._username = username
        self._create_result = create_result or CommandResult(
            returncode=0, stdout=f"{pr_url}\n", stderr=""
        )
        self._browse_result = browse_result or CommandResult(returncode=0, stdout="", stderr="")

        self._created_prs: list[tuple[str, str, str]] = []
        self._browsed: list[str] = []

    @property
    def created_prs(self) -> list[tuple[str, str, str]]:
        """List of (title, body, base) tuples passed to create_pull_request()."""
        return self._created_prs

    @property
    def browsed(self) -> list[str]:
        """Targets passed to browse()."""
        return self._browsed

    def check_auth_status(self) -> tuple[bool, str | None, str | None]:
        if not self._authenticated:
            return (False, None, None)
        return (True, self._username, "github.com")

    def create_pull_request(self, title: str, body: str, base: str) -> CommandResult:
        self._created_prs.append((title, body, base))
        return self._create_result

    def browse(self, target: str) -> CommandResult:
        self._browsed.append(target)
        return self._browse_result
