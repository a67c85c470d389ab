"""Ordered step execution that stops at the first failure."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, List, Optional, TypeVar

from git_worktree_setup.exceptions import SetupAborted, WorktreeSetupError
from git_worktree_setup.logging_config import get_logger

logger = get_logger(__name__)

ContextT = TypeVar("ContextT")


class StepStatus(Enum):
    """How a single step ended."""
    OK = "ok"
    SKIPPED = "skipped"
    WARNED = "warned"  # Completed, but something optional was missing
    FAILED = "failed"


class Outcome(Enum):
    """How the whole run ended."""
    SUCCEEDED = "succeeded"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass
class StepResult:
    name: str
    status: StepStatus = StepStatus.OK
    detail: Optional[str] = None


@dataclass
class Step(Generic[ContextT]):
    name: str
    action: Callable[[ContextT], StepStatus]


@dataclass
class PipelineResult:
    outcome: Outcome
    steps: List[StepResult] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[WorktreeSetupError] = None

    @property
    def exit_code(self) -> int:
        if self.error is not None:
            return self.error.exit_code
        return 0

    def status_of(self, name: str) -> Optional[StepStatus]:
        """Status of the named step, None if it never ran."""
        for step in self.steps:
            if step.name == name:
                return step.status
        return None


def run_pipeline(steps: List[Step[ContextT]], context: ContextT) -> PipelineResult:
    """
    Run each step with the shared context, in order.

    The first WorktreeSetupError ends the run: SetupAborted yields an aborted
    result, anything else a failed one. Nothing already done is rolled back.
    Other exceptions are bugs and propagate.
    """
    results: List[StepResult] = []
    for step in steps:
        logger.debug(f"Step '{step.name}' starting")
        try:
            status = step.action(context)
        except SetupAborted as e:
            logger.info(f"Step '{step.name}' aborted by user")
            return PipelineResult(Outcome.ABORTED, results, step.name, e)
        except WorktreeSetupError as e:
            logger.info(f"Step '{step.name}' failed: {e}")
            results.append(StepResult(step.name, StepStatus.FAILED, str(e)))
            return PipelineResult(Outcome.FAILED, results, step.name, e)

        results.append(StepResult(step.name, status))
        logger.debug(f"Step '{step.name}' finished: {status.value}")

    return PipelineResult(Outcome.SUCCEEDED, results)
