"""OpenAI LLM provider implementation."""

import logging

from openai import AsyncOpenAI

from agent_workflow.core.config import LLMConfig
from agent_workflow.errors import ConfigurationError
from agent_workflow.llm.provider import GenerateRequest, LLMProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI API provider implementation."""

    name = "openai"

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the OpenAI provider.

        Args:
            config: LLM configuration.

        Raises:
            ConfigurationError: If API key is not provided.
        """
        if not config.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY is not set")

        self.config = config
        self.client = AsyncOpenAI(api_key=config.openai_api_key)
        self.model = config.openai_model

        logger.info(f"OpenAI provider initialized with model: {self.model}")

    async def generate(self, request: GenerateRequest) -> str:
        """Generate a chat completion using the OpenAI API.

        Args:
            request: Prompt pair and sampling temperature.

        Returns:
            Generated text.
        """
        logger.debug(f"Generating completion for prompt: {request.user[:100]}...")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=request.to_messages(),  # type: ignore[arg-type]
            temperature=request.temperature,
        )

        content = response.choices[0].message.content or ""
        logger.debug(f"Generated {len(content)} characters")

        return content
