"""Workflow domain: schema, loading, execution events and the executors.

The executors are the only part of the system with ordering, concurrency and
failure-propagation contracts:

- sequential steps are totally ordered
- parallel branches run concurrently, joined by a hard barrier, then merged
  into the context before the aggregator runs
"""

from agent_workflow.workflow.engine import run_workflow
from agent_workflow.workflow.events import (
    ExecutionEvent,
    ExecutionEventType,
    NullSink,
    RecordingSink,
    ReportingSink,
)
from agent_workflow.workflow.loader import load_workflow_config
from agent_workflow.workflow.parallel import run_parallel_step
from agent_workflow.workflow.schema import (
    ParallelStep,
    SequentialStep,
    WorkflowConfig,
    WorkflowStep,
)
from agent_workflow.workflow.sequential import run_sequential_steps

__all__ = [
    "ExecutionEvent",
    "ExecutionEventType",
    "NullSink",
    "ParallelStep",
    "RecordingSink",
    "ReportingSink",
    "SequentialStep",
    "WorkflowConfig",
    "WorkflowStep",
    "load_workflow_config",
    "run_parallel_step",
    "run_sequential_steps",
    "run_workflow",
]
