"""Schema-constrained content generation through the OpenAI API."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

import openai
from pydantic import ValidationError

from gitlift.core.ai.classification import error_from_exception
from gitlift.core.ai.contexts import CommitContext, GenerationContext, PrContext
from gitlift.core.ai.prompts import build_commit_prompts, build_pr_prompts
from gitlift.core.ai.schemas import (
    CommitMessageContent,
    GeneratedContent,
    PrContent,
    build_response_format,
)
from gitlift.core.artifacts import GeneratedArtifact
from gitlift.core.errors import GenerationValidationError, PrerequisiteError
from gitlift.core.prerequisites import API_KEY_ENV_VAR

logger = logging.getLogger(__name__)


class ContentGenerator(ABC):
    """Abstract interface for turning change context into a title/body pair."""

    @abstractmethod
    def generate(
        self, context: GenerationContext, *, model: str, language: str
    ) -> GeneratedArtifact:
        """Generate content for the artifact kind the context describes.

        Args:
            context: PrContext or CommitContext
            model: Provider model name
            language: Natural language to write the content in

        Returns:
            GeneratedArtifact of kind ``context.kind``

        Raises:
            PrerequisiteError: No API key is configured
            AIProviderError: The provider rejected or failed the request
            GenerationValidationError: The response did not match the schema
            UnknownGenerationError: Any other failure during the call
        """
        ...


class OpenAIContentGenerator(ContentGenerator):
    """Production generator using OpenAI chat completions with structured output."""

    def __init__(
        self,
        environ: Mapping[str, str],
        client_factory: Callable[..., Any] = openai.OpenAI,
    ) -> None:
        self._environ = environ
        self._client_factory = client_factory

    def generate(
        self, context: GenerationContext, *, model: str, language: str
    ) -> GeneratedArtifact:
        api_key = self._environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise PrerequisiteError(
                f"OpenAI API key is missing. Set the {API_KEY_ENV_VAR} environment variable."
            )

        schema, system_prompt, user_prompt = _request_parts(context, language)
        logger.debug("Requesting %s content from %s in %s", context.kind.value, model, language)

        try:
            client = self._client_factory(api_key=api_key)
            completion = client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format=build_response_format(schema),
            )
        except Exception as e:
            raise error_from_exception(e, model) from e

        content = _parse_completion(completion, schema)
        return GeneratedArtifact(kind=context.kind, title=content.title, body=content.body)


def _request_parts(
    context: GenerationContext, language: str
) -> tuple[type[GeneratedContent], str, str]:
    if isinstance(context, PrContext):
        system_prompt, user_prompt = build_pr_prompts(context, language)
        return PrContent, system_prompt, user_prompt
    if isinstance(context, CommitContext):
        system_prompt, user_prompt = build_commit_prompts(context, language)
        return CommitMessageContent, system_prompt, user_prompt
    raise TypeError(f"Unsupported generation context: {type(context).__name__}")


def _parse_completion(completion: Any, schema: type[GeneratedContent]) -> GeneratedContent:
    if not completion.choices:
        raise GenerationValidationError("AI response contained no choices.")

    message = completion.choices[0].message
    refusal = getattr(message, "refusal", None)
    if refusal:
        raise GenerationValidationError(f"The AI model refused to generate content: {refusal}")

    raw = message.content
    if not raw or not raw.strip():
        raise GenerationValidationError("AI response was empty.")

    try:
        return schema.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("Invalid AI response: %s", raw)
        raise GenerationValidationError(
            f"AI response did not match the expected format: {e}"
        ) from e
