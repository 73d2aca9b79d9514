from pathlib import Path

from .config import Settings
from .git import CommandExecutor, CommitMessageGenerator, GitOperations, PushWorkflow, WorkflowResult
from .llm import GeminiClient


def run_workflow(project_path: Path, settings: Settings) -> WorkflowResult:
    """Wire the executor, Gemini client and workflow for one run."""
    ops = GitOperations(CommandExecutor(cwd=project_path), remote=settings.remote)
    with GeminiClient(settings.api_key, model=settings.model, timeout=settings.timeout) as client:
        workflow = PushWorkflow(ops, CommitMessageGenerator(client))
        return workflow.run()
