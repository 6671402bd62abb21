"""Tests for `gitlift init`."""

from click.testing import CliRunner

from gitlift.cli.cli import cli
from gitlift.core.config import ConfigFile, InMemoryConfigStore
from gitlift.core.git.fake import FakeGit
from gitlift.core.github.fake import FakeGitHub
from tests.fakes.context import create_test_context
from tests.fakes.prompter import FakePrompter
from tests.fakes.user_feedback import FakeUserFeedback


def test_init_saves_project_config() -> None:
    store = InMemoryConfigStore()
    prompter = FakePrompter(texts=["develop", "gpt-4o", "portuguese"], confirms=[True])
    feedback = FakeUserFeedback()
    ctx = create_test_context(
        config_store=store, prompter=prompter, feedback=feedback, git=FakeGit()
    )

    result = CliRunner().invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.get(store.local_path) == ConfigFile(
        base_branch="develop", model="gpt-4o", language="portuguese", skip_confirmations=True
    )
    assert store.get(store.global_path) is None
    assert f"✓ Configuration saved to {store.local_path}" in feedback.successes


def test_init_global_flag_writes_home_config() -> None:
    store = InMemoryConfigStore()
    prompter = FakePrompter(texts=["main", "gpt-4.1-mini", "english"], confirms=[False])
    ctx = create_test_context(config_store=store, prompter=prompter)

    result = CliRunner().invoke(cli, ["init", "--global"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.get(store.global_path) is not None
    assert store.get(store.local_path) is None


def test_init_suggests_detected_base_branch() -> None:
    prompter = FakePrompter(texts=["develop", "m", "english"], confirms=[False])
    ctx = create_test_context(prompter=prompter, git=FakeGit(remote_branches={"develop"}))

    CliRunner().invoke(cli, ["init"], obj=ctx)

    assert prompter.text_prompts[0] == ("Default base branch for PRs", "develop")
    assert prompter.text_prompts[1] == ("Preferred OpenAI model", "gpt-4.1-mini")


def test_init_continues_when_prerequisites_missing() -> None:
    """Missing prerequisites are reported but do not stop setup."""
    store = InMemoryConfigStore()
    feedback = FakeUserFeedback()
    prompter = FakePrompter(texts=["main", "gpt-4o", "english"], confirms=[False])
    ctx = create_test_context(
        github=FakeGitHub(authenticated=False),
        config_store=store,
        prompter=prompter,
        feedback=feedback,
    )

    result = CliRunner().invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.get(store.local_path) is not None
    assert any("gh auth login" in w for w in feedback.warnings)
