"""Configuration loading, layering and persistence.

Settings come from three layers, later layers winning per field:

    defaults < .gitlift.toml < command-line flags

The file is looked up in the current directory first, then in the home
directory; the first one found is used alone (files are not merged with each
other). Example:

    base_branch = "develop"
    model = "gpt-4.1-mini"
    language = "portuguese"
    skip_confirmations = false
"""

import logging
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import tomlkit
import tomlkit.exceptions
from pydantic import BaseModel, ConfigDict, ValidationError

from gitlift.core.errors import ConfigError

T = TypeVar("T")

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".gitlift.toml"


class ConfigFile(BaseModel):
    """Contents of a .gitlift.toml file. Every key is optional."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    base_branch: str | None = None
    model: str | None = None
    language: str | None = None
    skip_confirmations: bool | None = None


@dataclass(frozen=True)
class ResolvedConfig:
    """Effective settings for one run."""

    base_branch: str
    model: str
    language: str
    skip_confirmations: bool


@dataclass(frozen=True)
class ConfigOverrides:
    """Values given on the command line. None means the flag was not given."""

    base_branch: str | None = None
    model: str | None = None
    language: str | None = None
    skip_confirmations: bool | None = None


DEFAULT_CONFIG = ResolvedConfig(
    base_branch="main",
    model="gpt-4.1-mini",
    language="english",
    skip_confirmations=False,
)


def resolve_config(file_config: ConfigFile, overrides: ConfigOverrides) -> ResolvedConfig:
    """Merge defaults, file values and overrides, field by field."""

    def pick(override: T | None, from_file: T | None, default: T) -> T:
        if override is not None:
            return override
        if from_file is not None:
            return from_file
        return default

    return ResolvedConfig(
        base_branch=pick(
            overrides.base_branch, file_config.base_branch, DEFAULT_CONFIG.base_branch
        ),
        model=pick(overrides.model, file_config.model, DEFAULT_CONFIG.model),
        language=pick(overrides.language, file_config.language, DEFAULT_CONFIG.language),
        skip_confirmations=pick(
            overrides.skip_confirmations,
            file_config.skip_confirmations,
            DEFAULT_CONFIG.skip_confirmations,
        ),
    )


class ConfigStore(ABC):
    """Abstract interface for config file access.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def find(self) -> Path | None:
        """Locate the config file to use, or None if there is none."""
        ...

    @abstractmethod
    def load(self, path: Path) -> ConfigFile:
        """Load and validate a config file.

        Raises:
            ConfigError: If the file cannot be read, is not TOML, or has
                unknown keys or wrongly typed values
        """
        ...

    @abstractmethod
    def save(self, config: ConfigFile, *, global_scope: bool) -> Path:
        """Write config to the project file, or the home file if global_scope.

        Returns:
            Path that was written
        """
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation reading and writing .gitlift.toml files."""

    def __init__(self, cwd: Path, home: Path) -> None:
        self._local_path = cwd / CONFIG_FILE_NAME
        self._global_path = home / CONFIG_FILE_NAME

    def find(self) -> Path | None:
        for candidate in (self._local_path, self._global_path):
            if candidate.is_file():
                return candidate
        return None

    def load(self, path: Path) -> ConfigFile:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in configuration file {path}: {e}") from e

        try:
            return ConfigFile.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}:\n{e}") from e

    def save(self, config: ConfigFile, *, global_scope: bool) -> Path:
        """Write config, preserving comments and unrelated formatting of an existing file."""
        path = self._global_path if global_scope else self._local_path

        try:
            if path.exists():
                with path.open("r", encoding="utf-8") as f:
                    doc = tomlkit.load(f)
            else:
                doc = tomlkit.document()
                doc.add(tomlkit.comment("gitlift configuration"))

            for key, value in config.model_dump(exclude_none=True).items():
                doc[key] = value

            with path.open("w", encoding="utf-8") as f:
                tomlkit.dump(doc, f)
        except OSError as e:
            raise ConfigError(f"Cannot write configuration file {path}: {e}") from e
        except tomlkit.exceptions.ParseError as e:
            raise ConfigError(f"Invalid TOML in configuration file {path}: {e}") from e
        return path


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(
        self,
        *,
        local_config: ConfigFile | None = None,
        global_config: ConfigFile | None = None,
        load_error: str | None = None,
    ) -> None:
        """Initialize in-memory config store.

        Args:
            local_config: Project config (None = no project file)
            global_config: Home config (None = no home file)
            load_error: When set, load() raises ConfigError with this message
        """
        self.local_path = Path("/fake/project") / CONFIG_FILE_NAME
        self.global_path = Path("/fake/home") / CONFIG_FILE_NAME
        self._configs: dict[Path, ConfigFile] = {}
        if local_config is not None:
            self._configs[self.local_path] = local_config
        if global_config is not None:
            self._configs[self.global_path] = global_config
        self._load_error = load_error

    def get(self, path: Path) -> ConfigFile | None:
        """Stored config for path, for test assertions."""
        return self._configs.get(path)

    def find(self) -> Path | None:
        for candidate in (self.local_path, self.global_path):
            if candidate in self._configs:
                return candidate
        return None

    def load(self, path: Path) -> ConfigFile:
        if self._load_error is not None:
            raise ConfigError(self._load_error)
        if path not in self._configs:
            raise ConfigError(f"Cannot read configuration file {path}: not found")
        return self._configs[path]

    def save(self, config: ConfigFile, *, global_scope: bool) -> Path:
        path = self.global_path if global_scope else self.local_path
        self._configs[path] = config
        return path


def load_config_file(store: ConfigStore) -> tuple[ConfigFile, Path | None]:
    """Load whichever config file applies.

    Returns:
        The file contents (empty when no file exists) and its path
    """
    path = store.find()
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return ConfigFile(), None

    logger.debug("Loading configuration from %s", path)
    return store.load(path), path
