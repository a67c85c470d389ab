"""Setup orchestration for git-worktree-setup."""

from .pipeline import Outcome, PipelineResult, Step, StepResult, StepStatus, run_pipeline
from .worktree_setup import SetupContext, WorktreeSetup

__all__ = [
    "Outcome",
    "PipelineResult",
    "SetupContext",
    "Step",
    "StepResult",
    "StepStatus",
    "WorktreeSetup",
    "run_pipeline",
]
