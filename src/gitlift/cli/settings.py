"""Resolve the effective settings for a command invocation."""

from gitlift.core.config import ConfigOverrides, ResolvedConfig, load_config_file, resolve_config
from gitlift.core.context import GitLiftContext


def resolve_run_config(ctx: GitLiftContext, overrides: ConfigOverrides) -> ResolvedConfig:
    """Load the config file (if any), report it, and apply command-line overrides.

    Raises:
        ConfigError: If the config file is invalid
    """
    file_config, path = load_config_file(ctx.config_store)
    if path is not None:
        ctx.feedback.info(f"Loaded configuration from: {path}")
    return resolve_config(file_config, overrides)
