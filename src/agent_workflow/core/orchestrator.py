"""Main orchestrator implementation."""

import logging

from agent_workflow.agents.registry import AgentRegistry
from agent_workflow.context.store import ContextStore
from agent_workflow.core.config import OrchestratorConfig
from agent_workflow.llm.factory import LLMFactory
from agent_workflow.llm.provider import LLMProvider
from agent_workflow.llm.rate_limiter import RateLimiter
from agent_workflow.workflow.engine import run_workflow
from agent_workflow.workflow.events import ReportingSink
from agent_workflow.workflow.schema import WorkflowConfig

logger = logging.getLogger(__name__)


class Orchestrator:
    """Composes the model client, the rate limiter and the executors.

    One orchestrator may run many workflows. The rate limiter is shared by all
    of them; every run gets its own fresh :class:`ContextStore`.
    """

    def __init__(
        self,
        config: OrchestratorConfig | None = None,
        *,
        llm: LLMProvider | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            config: Configuration object. If None, loads from environment.
            llm: Provider override; built from ``config.llm`` when omitted.
            rate_limiter: Limiter override; built from ``config.rate_limit``
                when omitted.

        Raises:
            ConfigurationError: If the provider cannot be created.
        """
        self.config = config or OrchestratorConfig()

        self.llm: LLMProvider = llm or LLMFactory.create(self.config.llm)
        self.rate_limiter: RateLimiter = rate_limiter or RateLimiter(
            max_requests=self.config.rate_limit.max_requests,
            window_ms=self.config.rate_limit.window_ms,
            buffer_ms=self.config.rate_limit.buffer_ms,
        )

        logger.info("Orchestrator initialized", extra={"provider": self.llm.name})

    async def run(
        self,
        workflow: WorkflowConfig,
        user_input: str,
        *,
        context: ContextStore | None = None,
        reporter: ReportingSink | None = None,
    ) -> ContextStore:
        """Run ``workflow`` once for ``user_input``.

        Pass ``context`` to keep a handle on the entries recorded before a
        failure; otherwise a fresh store is created.

        Returns:
            The context holding every recorded output.

        Raises:
            ConfigurationError: If the workflow references unknown agents.
            ExecutionError: If a model call fails.
        """
        registry = AgentRegistry.from_config(workflow)
        if context is None:
            context = ContextStore(user_input)
        elif context.user_input != user_input:
            raise ValueError("context was created for a different user input")

        return await run_workflow(
            workflow,
            registry=registry,
            context=context,
            llm=self.llm,
            rate_limiter=self.rate_limiter,
            reporter=reporter,
            temperature=self.config.temperature,
        )
