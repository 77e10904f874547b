"""Loading and validation of workflow files.

Structural validation is done by pydantic; :func:`validate_semantics` then
checks the cross-references the schema cannot express. Every failure surfaces
as :class:`~agent_workflow.errors.ConfigurationError` before any step runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agent_workflow.errors import ConfigurationError
from agent_workflow.tools.invoker import resolve_tools
from agent_workflow.workflow.schema import ParallelStep, SequentialStep, WorkflowConfig

logger = logging.getLogger(__name__)


def load_yaml_config(path: Path) -> Any:
    if not path.exists():
        raise ConfigurationError(f"Workflow file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e


def parse_workflow_config(raw: Any) -> WorkflowConfig:
    if raw is None:
        raise ConfigurationError("Workflow file is empty")

    try:
        return WorkflowConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid workflow configuration:\n{e}") from e


def validate_semantics(config: WorkflowConfig) -> None:
    """Check ids, references and tools.

    Raises:
        ConfigurationError: On the first problem found.
    """
    agent_ids: set[str] = set()
    for agent in config.agents:
        if agent.id in agent_ids:
            raise ConfigurationError(f"Duplicate agent id: {agent.id}")
        agent_ids.add(agent.id)
        resolve_tools(agent.tools)

    def _require(agent_id: str, where: str) -> None:
        if agent_id not in agent_ids:
            raise ConfigurationError(f"Unknown agent {agent_id!r} referenced in {where}")

    for index, step in enumerate(config.workflow.steps, start=1):
        where = f"step {index}"
        if isinstance(step, SequentialStep):
            _require(step.agent, where)
        elif isinstance(step, ParallelStep):
            if len(set(step.branches)) != len(step.branches):
                raise ConfigurationError(f"Duplicate branch agent in {where}")
            for branch in step.branches:
                _require(branch, f"{where} branches")
            _require(step.then.agent, f"{where} aggregator")
            if step.then.agent in step.branches:
                raise ConfigurationError(
                    f"Aggregator {step.then.agent!r} is also a branch in {where}"
                )


def load_workflow_config(path: Path) -> WorkflowConfig:
    """Read, parse and validate a workflow file."""
    config = parse_workflow_config(load_yaml_config(path))
    validate_semantics(config)

    logger.info(
        "Workflow loaded",
        extra={
            "path": str(path),
            "agents": len(config.agents),
            "steps": len(config.workflow.steps),
        },
    )
    return config
