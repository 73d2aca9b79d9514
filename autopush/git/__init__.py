from .contracts import (
    CommandResult,
    CommitMessage,
    FailureReason,
    MessageOrigin,
    Outcome,
    PushOutcome,
    RepositoryStatus,
    RunState,
    WorkflowResult,
)
from .executor import CommandExecutor
from .operations import GitOperations
from .commit_message import CommitMessageGenerator
from .workflow import PushWorkflow, format_summary

__all__ = [
    "CommandResult",
    "CommitMessage",
    "FailureReason",
    "MessageOrigin",
    "Outcome",
    "PushOutcome",
    "RepositoryStatus",
    "RunState",
    "WorkflowResult",
    "CommandExecutor",
    "GitOperations",
    "CommitMessageGenerator",
    "PushWorkflow",
    "format_summary",
]
