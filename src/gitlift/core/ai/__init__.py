from gitlift.core.ai.contexts import CommitContext, GenerationContext, PrContext
from gitlift.core.ai.generator import ContentGenerator, OpenAIContentGenerator

__all__ = [
    "CommitContext",
    "ContentGenerator",
    "GenerationContext",
    "OpenAIContentGenerator",
    "PrContext",
]
