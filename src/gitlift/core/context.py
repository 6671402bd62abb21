"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitlift.core.ai.generator import ContentGenerator, OpenAIContentGenerator
from gitlift.core.command_runner import CommandRunner, RealCommandRunner
from gitlift.core.config import ConfigStore, FilesystemConfigStore
from gitlift.core.git.abc import Git
from gitlift.core.git.real import RealGit
from gitlift.core.github.abc import GitHub
from gitlift.core.github.real import RealGitHub
from gitlift.core.prompter import ClickPrompter, Prompter
from gitlift.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class GitLiftContext:
    """Immutable context holding all dependencies for gitlift operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: CommandRunner
    git: Git
    github: GitHub
    generator: ContentGenerator
    prompter: Prompter
    feedback: UserFeedback
    config_store: ConfigStore
    environ: Mapping[str, str]
    cwd: Path  # Current working directory at CLI invocation


def create_context() -> GitLiftContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Example:
        >>> ctx = create_context()
        >>> ctx.git.get_current_branch()
        'feature'
    """
    cwd = Path.cwd()
    environ = dict(os.environ)
    runner = RealCommandRunner()

    return GitLiftContext(
        runner=runner,
        git=RealGit(runner, cwd),
        github=RealGitHub(runner, cwd),
        generator=OpenAIContentGenerator(environ),
        prompter=ClickPrompter(),
        feedback=InteractiveFeedback(),
        config_store=FilesystemConfigStore(cwd, Path.home()),
        environ=environ,
        cwd=cwd,
    )
