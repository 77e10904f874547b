"""Runtime configuration for the orchestrator.

Configuration is loaded from environment variables and a local ``.env`` file
(if present). The workflow itself (agents and steps) lives in a YAML file and
is handled by :mod:`agent_workflow.workflow.loader`.
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseSettings):
    """Configuration for LLM providers."""

    provider: Literal["gemini", "openai", "mock"] = Field(
        default="gemini",
        description="LLM provider to use",
    )

    # Gemini settings (served through the OpenAI-compatible endpoint)
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "ORCHESTRATOR_LLM_GEMINI_API_KEY"),
        description="Gemini API key",
    )
    gemini_model: str = Field(
        default="gemini-flash-latest",
        description="Gemini model to use",
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        description="OpenAI-compatible Gemini endpoint",
    )

    # OpenAI settings
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "ORCHESTRATOR_LLM_OPENAI_API_KEY"),
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model to use",
    )

    model_config = SettingsConfigDict(
        env_prefix="ORCHESTRATOR_LLM_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


class RateLimitConfig(BaseSettings):
    """Sliding-window admission control for outbound model calls."""

    max_requests: int = Field(
        default=5,
        gt=0,
        description="Maximum calls admitted within one window",
    )
    window_ms: int = Field(
        default=60_000,
        gt=0,
        description="Length of the trailing window in milliseconds",
    )
    buffer_ms: int = Field(
        default=100,
        ge=0,
        description="Extra delay added to each computed wait",
    )

    model_config = SettingsConfigDict(
        env_prefix="ORCHESTRATOR_RATE_LIMIT_",
        env_file=".env",
        extra="ignore",
    )


class OrchestratorConfig(BaseSettings):
    """Main configuration for the orchestrator."""

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Sampling temperature sent with every agent call",
    )

    llm: LLMConfig = Field(
        default_factory=LLMConfig,
        description="LLM configuration",
    )
    rate_limit: RateLimitConfig = Field(
        default_factory=RateLimitConfig,
        description="Rate limiter configuration",
    )

    model_config = SettingsConfigDict(
        env_prefix="ORCHESTRATOR_",
        env_file=".env",
        extra="ignore",
    )
