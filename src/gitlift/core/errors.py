"""Error taxonomy shared by every gitlift pipeline stage.

Each stage raises a GitLiftError subclass carrying a stable ErrorKind, so the
CLI layer can report failures uniformly. The original exception (when there is
one) is chained with ``raise ... from`` and available as ``__cause__``.

Operator-initiated aborts are not errors: they raise OperationCancelled, which
the CLI layer turns into a clean exit with code 0.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Category of a pipeline failure."""

    PREREQUISITE = "prerequisite"
    GIT_OPERATION = "git_operation"
    REMOTE_TOOL = "remote_tool"
    AI_PROVIDER = "ai_provider"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class ProviderErrorKind(Enum):
    """Sub-classification of AI provider failures."""

    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    MODEL_NOT_FOUND = "model_not_found"
    QUOTA_EXCEEDED = "quota_exceeded"
    GENERIC = "generic"


class GitLiftError(Exception):
    """Base class for all normalized gitlift failures."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PrerequisiteError(GitLiftError):
    """A required tool or credential is missing."""

    kind = ErrorKind.PREREQUISITE


class GitOperationError(GitLiftError):
    """A git query or local git mutation failed."""

    kind = ErrorKind.GIT_OPERATION


class RemoteToolError(GitLiftError):
    """Pushing or talking to the remote-collaboration tool (gh) failed."""

    kind = ErrorKind.REMOTE_TOOL


class AIProviderError(GitLiftError):
    """The AI provider call failed; provider_kind says how."""

    kind = ErrorKind.AI_PROVIDER

    def __init__(self, message: str, *, provider_kind: ProviderErrorKind) -> None:
        super().__init__(message)
        self.provider_kind = provider_kind


class GenerationValidationError(GitLiftError):
    """The AI response did not match the requested shape."""

    kind = ErrorKind.VALIDATION


class ConfigError(GitLiftError):
    """The persisted configuration file is unreadable or invalid."""

    kind = ErrorKind.VALIDATION


class UnknownGenerationError(GitLiftError):
    """Something other than a provider call failed during generation."""

    kind = ErrorKind.UNKNOWN


class OperationCancelled(Exception):
    """The operator declined to continue at a decision point."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
