"""LLM clients for hosted chat-completion providers."""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

import anthropic
import openai

from taskforge.config.schema import LLMConfig

logger = logging.getLogger(__name__)


class LLMResponseError(Exception):
    """Provider returned a reply without usable content."""

    pass


@dataclass
class LLMResponse:
    """Response from LLM."""

    content: str
    model: str
    tokens_used: int


class LLMClient(ABC):
    """Abstract chat-completion client."""

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        system: str | None = None,
    ) -> LLMResponse:
        """Send prompt to LLM and get response."""
        pass


class AnthropicLLMClient(LLMClient):
    """Anthropic API client."""

    def __init__(self, api_key: str, base_url: str | None = None):
        self.api_key = api_key
        kwargs = {"api_key": api_key}
        if base_url:
            kwargs["base_url"] = base_url
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        system: str | None = None,
    ) -> LLMResponse:
        """Call Anthropic API."""
        kwargs = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        response = await self.client.messages.create(**kwargs)

        text_blocks = [block.text for block in response.content if getattr(block, "text", None)]
        if not text_blocks:
            raise LLMResponseError(f"Empty response from {model}")

        return LLMResponse(
            content="".join(text_blocks),
            model=model,
            tokens_used=response.usage.input_tokens + response.usage.output_tokens,
        )


class OpenAILLMClient(LLMClient):
    """OpenAI API client. Also works against OpenAI-compatible gateways."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        default_headers: dict[str, str] | None = None,
    ):
        self.api_key = api_key
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers=default_headers or None,
        )

    async def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        system: str | None = None,
    ) -> LLMResponse:
        """Call OpenAI chat completions."""
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        response = await self.client.chat.completions.create(
            model=model, max_tokens=max_tokens, temperature=temperature, messages=messages
        )

        if not response.choices or response.choices[0].message.content is None:
            raise LLMResponseError(f"Empty response from {model}")

        return LLMResponse(
            content=response.choices[0].message.content,
            model=model,
            tokens_used=response.usage.total_tokens if response.usage else 0,
        )


class LLMClientFactory:
    """
    Factory for creating LLM clients based on configuration.

    Supports multiple providers with automatic API key detection.
    Returns None if no API key is available.
    """

    # Provider -> (env var, model prefix, client class)
    PROVIDERS: ClassVar[dict[str, tuple[str, str, type]]] = {
        "anthropic": ("ANTHROPIC_API_KEY", "claude-", AnthropicLLMClient),
        "openai": ("OPENAI_API_KEY", "gpt-", OpenAILLMClient),
    }

    @classmethod
    def create(cls, config: LLMConfig) -> LLMClient | None:
        """Create an LLM client for the configured provider.

        Provider order: explicit config, model name prefix, first provider
        with an API key in the environment.
        """
        provider = config.provider or cls._infer_provider(config.model)
        if not provider:
            provider = cls._find_available_provider()

        if not provider:
            logger.warning("No LLM provider available (no API keys found)")
            return None

        if provider not in cls.PROVIDERS:
            raise ValueError(f"Unknown LLM provider: {provider}")

        env_var, _, client_class = cls.PROVIDERS[provider]
        api_key = os.getenv(env_var)

        if not api_key:
            logger.warning("No API key found for %s (set %s)", provider, env_var)
            return None

        logger.info("Using %s LLM client", provider)
        if client_class is OpenAILLMClient:
            return OpenAILLMClient(
                api_key, base_url=config.base_url, default_headers=config.extra_headers
            )
        return client_class(api_key, base_url=config.base_url)

    @classmethod
    def _infer_provider(cls, model: str) -> str | None:
        """Infer provider from model name prefix."""
        for provider, (_, prefix, _) in cls.PROVIDERS.items():
            if model.startswith(prefix):
                return provider
        return None

    @classmethod
    def _find_available_provider(cls) -> str | None:
        """Find first provider with available API key."""
        for provider, (env_var, _, _) in cls.PROVIDERS.items():
            if os.getenv(env_var):
                return provider
        return None

    @classmethod
    def is_available(cls) -> bool:
        """Check if any LLM provider is available."""
        return cls._find_available_provider() is not None
