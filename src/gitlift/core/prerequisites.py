"""Tool and credential checks run before any pipeline touches the repository."""

import logging
from collections.abc import Mapping

from gitlift.core.command_runner import CommandRunner
from gitlift.core.errors import PrerequisiteError
from gitlift.core.github.abc import GitHub

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OPENAI_API_KEY"


def validate_prerequisites(
    runner: CommandRunner,
    github: GitHub,
    environ: Mapping[str, str],
    *,
    require_github: bool = True,
) -> None:
    """Confirm required tools are installed and credentials are present.

    Checks run in order and stop at the first failure: git on PATH, gh on
    PATH, gh authenticated, API key set. Nothing is cached between calls.

    Args:
        runner: Used to locate executables
        github: Used to query gh authentication
        environ: Environment to read the API key from
        require_github: Skip both gh checks when False (the commit pipeline
            never talks to GitHub)

    Raises:
        PrerequisiteError: Naming the first missing prerequisite and how to fix it
    """
    if runner.get_installed_tool_path("git") is None:
        raise PrerequisiteError("Git is not installed. Please install git and try again.")
    logger.debug("git found")

    if require_github:
        if runner.get_installed_tool_path("gh") is None:
            raise PrerequisiteError(
                "GitHub CLI (gh) is not installed. Please install it "
                "(e.g., 'brew install gh') and authenticate with 'gh auth login'."
            )

        is_authenticated, username, hostname = github.check_auth_status()
        if not is_authenticated:
            raise PrerequisiteError(
                "GitHub CLI is not authenticated. Please run 'gh auth login'."
            )
        logger.debug("gh authenticated as %s on %s", username, hostname)

    if not has_api_key(environ):
        raise PrerequisiteError(
            f"{API_KEY_ENV_VAR} environment variable is not set. Please set it "
            f"(e.g., 'export {API_KEY_ENV_VAR}=your_key') and try again."
        )


def has_api_key(environ: Mapping[str, str]) -> bool:
    return bool(environ.get(API_KEY_ENV_VAR, "").strip())
