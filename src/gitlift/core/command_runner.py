"""External process execution behind a narrow, fakeable interface.

All git and gh invocations go through CommandRunner.run(), which never raises
on a nonzero exit. Callers inspect the returned CommandResult and decide what
is fatal; describe_failure() builds the enriched error text they attach.
"""

import logging
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND_EXIT_CODE = 127


class CommandResult(NamedTuple):
    """Result from running a subprocess command.

    Attributes:
        returncode: Process exit code (0 means success)
        stdout: Standard output from the command
        stderr: Standard error from the command
    """

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner(ABC):
    """Abstract interface for running external commands.

    This abstraction enables testing git and gh integrations with an in-memory
    fake instead of patching subprocess.
    """

    @abstractmethod
    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        """Run a command to completion and capture its output.

        Args:
            args: Command and arguments to execute
            cwd: Working directory for the command

        Returns:
            CommandResult with exit code and captured streams. A missing
            executable is reported as exit code 127, not raised.
        """
        ...

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the executable path of a tool on PATH, or None if absent."""
        ...


class RealCommandRunner(CommandRunner):
    """Production implementation using subprocess."""

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        cmd = list(args)
        logger.debug("Running command: %s (cwd=%s)", shlex.join(cmd), cwd)
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError:
            logger.debug("Executable not found: %s", cmd[0])
            return CommandResult(
                returncode=COMMAND_NOT_FOUND_EXIT_CODE,
                stdout="",
                stderr=f"Command not found: {cmd[0]}",
            )

        logger.debug("Command exited with code %d", result.returncode)
        return CommandResult(
            returncode=result.returncode, stdout=result.stdout, stderr=result.stderr
        )

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)


def describe_failure(args: Sequence[str], result: CommandResult, operation: str) -> str:
    """Build an error message with operation context and captured output.

    Args:
        args: The command that was run
        result: Its (failed) result
        operation: Human-readable description, e.g. "push branch 'feature'"

    Returns:
        Multi-line message naming the operation, command, exit code and any
        non-empty stdout/stderr
    """
    message = f"Failed to {operation}"
    message += f"\nCommand: {shlex.join(list(args))}"
    message += f"\nExit code: {result.returncode}"

    stdout = result.stdout.strip()
    if stdout:
        message += f"\nstdout: {stdout}"

    stderr = result.stderr.strip()
    if stderr:
        message += f"\nstderr: {stderr}"

    return message
