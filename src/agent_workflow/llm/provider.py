"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerateRequest:
    """A single generation request sent to the model service."""

    system: str
    user: str
    temperature: float = 0.2

    def to_messages(self) -> list[dict[str, str]]:
        """Chat-style message list with separate system and user turns."""
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This interface allows pluggable LLM backends (Gemini, OpenAI, offline mock).
    Providers do not retry; failures propagate to the executor that issued
    the call.
    """

    name: str = "base"

    @abstractmethod
    async def generate(self, request: GenerateRequest) -> str:
        """Generate text for a system/user prompt pair.

        Args:
            request: Prompt pair and sampling temperature.

        Returns:
            Generated text.
        """
        pass

