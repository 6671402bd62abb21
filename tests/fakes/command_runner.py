"""Fake implementation of CommandRunner for testing.

Lets RealGit and RealGitHub be exercised against canned command output
without spawning processes.
"""

from collections.abc import Sequence
from pathlib import Path

from gitlift.core.command_runner import CommandResult, CommandRunner


class FakeCommandRunner(CommandRunner):
    """In-memory command runner with canned results.

    Examples:
        >>> runner = FakeCommandRunner(
        ...     results={("git", "rev-parse", "--abbrev-ref", "HEAD"): CommandResult(0, "main\\n", "")},
        ...     installed_tools={"git": "/usr/bin/git"},
        ... )
        >>> runner.run(["git", "rev-parse", "--abbrev-ref", "HEAD"]).stdout
        'main\\n'
    """

    def __init__(
        self,
        *,
        results: dict[tuple[str, ...], CommandResult] | None = None,
        installed_tools: dict[str, str] | None = None,
    ) -> None:
        """Initialize fake with predetermined results.

        Args:
            results: Mapping of full argument tuple -> result. Commands not in
                the mapping succeed with empty output.
            installed_tools: Mapping of tool name to executable path
        """
        self._results = results or {}
        self._installed_tools = installed_tools or {}
        self._calls: list[tuple[tuple[str, ...], Path | None]] = []

    @property
    def calls(self) -> list[tuple[tuple[str, ...], Path | None]]:
        """Recorded (args, cwd) pairs, in call order."""
        return self._calls

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [args for args, _ in self._calls]

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        key = tuple(args)
        self._calls.append((key, cwd))
        return self._results.get(key, CommandResult(returncode=0, stdout="", stderr=""))

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._installed_tools.get(tool_name)
