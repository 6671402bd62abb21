"""Production GitHub implementation using the gh CLI."""

import logging
from pathlib import Path

from gitlift.core.command_runner import CommandResult, CommandRunner
from gitlift.core.github.abc import GitHub
from gitlift.core.github.parsing import parse_gh_auth_status_output

logger = logging.getLogger(__name__)


class RealGitHub(GitHub):
    """Production implementation running gh through a CommandRunner."""

    def __init__(self, runner: CommandRunner, cwd: Path) -> None:
        self._runner = runner
        self._cwd = cwd

    def check_auth_status(self) -> tuple[bool, str | None, str | None]:
        """Check GitHub CLI authentication status.

        Runs `gh auth status` and parses the output. Looks for patterns like:
        - "Logged in to github.com account USERNAME"
        - "Logged in to github.com as USERNAME"

        Returns:
            Tuple of (is_authenticated, username, hostname)
        """
        result = self._runner.run(["gh", "auth", "status"], cwd=self._cwd)

        # gh auth status returns non-zero if not authenticated
        if result.returncode != 0:
            return (False, None, None)

        # Older gh versions print the status to stderr
        output = result.stdout + result.stderr
        is_authenticated, username, hostname = parse_gh_auth_status_output(output)
        if not is_authenticated:
            logger.debug("gh auth status succeeded but output was not recognized")
            return (True, None, None)
        return (is_authenticated, username, hostname)

    def create_pull_request(self, title: str, body: str, base: str) -> CommandResult:
        return self._runner.run(
            ["gh", "pr", "create", "--base", base, "--title", title, "--body", body],
            cwd=self._cwd,
        )

    def browse(self, target: str) -> CommandResult:
        return self._runner.run(["gh", "browse", target], cwd=self._cwd)
