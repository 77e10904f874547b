"""Gemini LLM provider.

Talks to Gemini through Google's OpenAI-compatible endpoint, so it shares the
``openai`` client library with :class:`OpenAIProvider`.
"""

import logging

from openai import AsyncOpenAI

from agent_workflow.core.config import LLMConfig
from agent_workflow.errors import ConfigurationError
from agent_workflow.llm.provider import GenerateRequest, LLMProvider

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini API provider implementation."""

    name = "gemini"

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the Gemini provider.

        Args:
            config: LLM configuration.

        Raises:
            ConfigurationError: If ``GEMINI_API_KEY`` is not provided.
        """
        if not config.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")

        self.config = config
        self.client = AsyncOpenAI(
            api_key=config.gemini_api_key,
            base_url=config.gemini_base_url,
        )
        self.model = config.gemini_model

        logger.info(f"Gemini provider initialized with model: {self.model}")

    async def generate(self, request: GenerateRequest) -> str:
        logger.debug(f"Generating completion for prompt: {request.user[:100]}...")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=request.to_messages(),  # type: ignore[arg-type]
            temperature=request.temperature,
        )

        content = response.choices[0].message.content or ""
        logger.debug(f"Generated {len(content)} characters")

        return content
