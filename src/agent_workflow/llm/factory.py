"""Factory for creating LLM providers."""

import logging

from agent_workflow.core.config import LLMConfig
from agent_workflow.errors import ConfigurationError
from agent_workflow.llm.gemini_provider import GeminiProvider
from agent_workflow.llm.mock_provider import MockProvider
from agent_workflow.llm.openai_provider import OpenAIProvider
from agent_workflow.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class LLMFactory:
    """Factory for creating LLM provider instances."""

    @staticmethod
    def create(config: LLMConfig) -> LLMProvider:
        """Create an LLM provider based on configuration.

        Args:
            config: LLM configuration specifying the provider.

        Returns:
            Configured LLM provider instance.

        Raises:
            ConfigurationError: If the provider is not supported or its
                credentials are missing.
        """
        logger.info(f"Creating LLM provider: {config.provider}")

        if config.provider == "gemini":
            return GeminiProvider(config)
        elif config.provider == "openai":
            return OpenAIProvider(config)
        elif config.provider == "mock":
            return MockProvider()
        else:
            raise ConfigurationError(f"Unsupported LLM provider: {config.provider}")
