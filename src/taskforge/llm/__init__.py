"""LLM client module."""
from taskforge.llm.client import (
    AnthropicLLMClient,
    LLMClient,
    LLMClientFactory,
    LLMResponse,
    LLMResponseError,
    OpenAILLMClient,
)

__all__ = [
    "AnthropicLLMClient",
    "LLMClient",
    "LLMClientFactory",
    "LLMResponse",
    "LLMResponseError",
    "OpenAILLMClient",
]
