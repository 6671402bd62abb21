"""Map AI provider failures onto a small, stable set of user-facing errors."""

import logging
from dataclasses import dataclass

import openai

from gitlift.core.errors import (
    AIProviderError,
    GitLiftError,
    ProviderErrorKind,
    UnknownGenerationError,
)

logger = logging.getLogger(__name__)

API_CALL_ERROR_PREFIX = "AI_APICallError:"

# Checked in order against the lowercased provider message; first match wins
_RULES = (
    (
        "incorrect api key",
        ProviderErrorKind.INVALID_CREDENTIAL,
        "Invalid OpenAI API Key provided. Please check your OPENAI_API_KEY environment variable.",
    ),
    (
        "rate limit",
        ProviderErrorKind.RATE_LIMITED,
        "OpenAI API rate limit exceeded. Please try again later or check your usage.",
    ),
    (
        "model not found",
        ProviderErrorKind.MODEL_NOT_FOUND,
        "The specified AI model was not found: {model}. "
        "Please check the model name or your API access.",
    ),
    (
        "insufficient quota",
        ProviderErrorKind.QUOTA_EXCEEDED,
        "OpenAI API quota exceeded. Please check your billing details on OpenAI.",
    ),
)


@dataclass(frozen=True)
class ProviderErrorClassification:
    kind: ProviderErrorKind
    message: str


def classify_provider_error(raw_message: str, model: str) -> ProviderErrorClassification:
    """Classify a provider error message.

    Matching is a case-insensitive substring test against the message with any
    "AI_APICallError:" prefix removed. Unrecognized messages are passed through
    verbatim behind an "OpenAI API Error: " prefix.

    Args:
        raw_message: Error text reported by the provider
        model: Model that was requested, named in the model-not-found message

    Returns:
        The category and the message to show the operator
    """
    provider_message = raw_message.strip()
    if provider_message.startswith(API_CALL_ERROR_PREFIX):
        provider_message = provider_message[len(API_CALL_ERROR_PREFIX) :].strip()

    lowered = provider_message.lower()
    for needle, kind, template in _RULES:
        if needle in lowered:
            return ProviderErrorClassification(kind=kind, message=template.format(model=model))

    return ProviderErrorClassification(
        kind=ProviderErrorKind.GENERIC, message=f"OpenAI API Error: {provider_message}"
    )


def error_from_exception(exc: Exception, model: str) -> GitLiftError:
    """Normalize an exception raised while calling the provider.

    The caller is expected to chain the original: ``raise error_from_exception(e, m) from e``.
    """
    if isinstance(exc, openai.APIError):
        logger.debug("Original AI error message: %s", exc.message)
        classification = classify_provider_error(exc.message, model)
        return AIProviderError(classification.message, provider_kind=classification.kind)

    logger.debug("Unexpected error during AI generation", exc_info=exc)
    return UnknownGenerationError(f"Failed to generate content using AI: {exc}")
