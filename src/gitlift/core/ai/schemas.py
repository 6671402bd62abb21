"""Structured output models requested from the AI provider.

The JSON schema of each model is sent as a strict `json_schema` response
format, and the raw response text is validated back against the same model.
Field descriptions are part of the schema and steer the model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeneratedContent(BaseModel):
    """A title/body pair. Extra keys are rejected, never ignored."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    body: str

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value


class PrContent(GeneratedContent):
    title: str = Field(
        description="A concise and informative title for the pull request (max 70 chars)."
    )
    body: str = Field(
        description=(
            "A detailed description of the changes in the pull request, explaining the "
            "'what' and 'why'. Use markdown formatting. Include bullet points for clarity "
            "if applicable."
        )
    )


class CommitMessageContent(GeneratedContent):
    title: str = Field(
        description=(
            "A concise and informative commit title following conventional commit "
            "standards (e.g., 'feat: add new feature', 'fix: resolve issue'). Max 72 chars."
        )
    )
    body: str = Field(
        description=(
            "A detailed description of the changes in bullet points, explaining the 'what' "
            "and 'why'. Each bullet point should start with '- '. If no detailed body is "
            "needed, this can be an empty string."
        )
    )


def build_response_format(schema: type[GeneratedContent]) -> dict[str, Any]:
    """Build the OpenAI `response_format` payload for a content model."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": schema.__name__,
            "schema": schema.model_json_schema(),
            "strict": True,
        },
    }
