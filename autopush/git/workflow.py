import logging
from dataclasses import dataclass, field
from typing import Callable

from .commit_message import CommitMessageGenerator
from .contracts import (
    CommitMessage,
    MessageOrigin,
    Outcome,
    PushOutcome,
    RepositoryStatus,
    RunState,
    WorkflowResult,
)
from .operations import GitOperations

logger = logging.getLogger(__name__)

TERMINAL_STATES = (RunState.DONE, RunState.ABORTED)


@dataclass
class _RunContext:
    outcome: Outcome | None = None
    status: RepositoryStatus | None = None
    message: CommitMessage | None = None
    push: PushOutcome | None = None
    detail: str | None = None
    hints: list[str] = field(default_factory=list)
    visited: list[RunState] = field(default_factory=list)


class PushWorkflow:
    """Stage, commit and push the working tree as one sequential run.

    Each state handler performs at most a couple of git calls and returns
    the next state. Only the initial push has a recovery edge: one retry
    with ``-u <remote> <branch>``.
    """

    PUSH_HINTS = [
        "Make sure a remote is configured: git remote add origin <url>",
        "Verify you are authenticated with the remote (SSH key or access token)",
    ]

    def __init__(self, ops: GitOperations, msg_generator: CommitMessageGenerator) -> None:
        self.ops = ops
        self.msg_generator = msg_generator
        self._handlers: dict[RunState, Callable[[_RunContext], RunState]] = {
            RunState.CHECK_REPO: self._check_repo,
            RunState.CHECK_CHANGES: self._check_changes,
            RunState.STAGE: self._stage,
            RunState.GENERATE_MESSAGE: self._generate_message,
            RunState.COMMIT: self._commit,
            RunState.PUSH: self._push,
            RunState.PUSH_RETRY: self._push_retry,
        }

    def run(self) -> WorkflowResult:
        ctx = _RunContext()
        state = RunState.CHECK_REPO
        while state not in TERMINAL_STATES:
            ctx.visited.append(state)
            logger.debug(f"State: {state.value}")
            state = self._handlers[state](ctx)
        ctx.visited.append(state)

        if state == RunState.DONE:
            logger.info(f"Done: {ctx.outcome.value}")
        else:
            logger.error(f"Aborted: {ctx.outcome.value}")

        return WorkflowResult(
            state=state,
            outcome=ctx.outcome,
            commit_message=ctx.message,
            push=ctx.push,
            files_changed=ctx.status.file_count if ctx.status else 0,
            detail=ctx.detail,
            hints=ctx.hints,
            visited=ctx.visited,
        )

    def _abort(self, ctx: _RunContext, outcome: Outcome, detail: str | None = None) -> RunState:
        ctx.outcome = outcome
        ctx.detail = detail
        if detail:
            logger.error(detail)
        return RunState.ABORTED

    def _done(self, ctx: _RunContext, outcome: Outcome) -> RunState:
        ctx.outcome = outcome
        return RunState.DONE

    def _check_repo(self, ctx: _RunContext) -> RunState:
        logger.info("Checking git repository...")
        result = self.ops.probe_repository()
        if not result.ok:
            return self._abort(ctx, Outcome.NOT_A_REPOSITORY, result.text)
        return RunState.CHECK_CHANGES

    def _check_changes(self, ctx: _RunContext) -> RunState:
        logger.info("Checking for changes...")
        status = self.ops.read_status()
        if status is None:
            return self._abort(ctx, Outcome.STATUS_FAILED, "git status --porcelain failed")
        if not status.has_changes:
            logger.info("No changes to commit, working tree is up to date")
            return self._done(ctx, Outcome.UP_TO_DATE)
        ctx.status = status
        logger.info(f"Found {status.file_count} changed file(s)")
        return RunState.STAGE

    def _stage(self, ctx: _RunContext) -> RunState:
        logger.info("Staging changes...")
        result = self.ops.stage_all()
        if not result.ok:
            return self._abort(ctx, Outcome.STAGE_FAILED, result.text)
        return RunState.GENERATE_MESSAGE

    def _generate_message(self, ctx: _RunContext) -> RunState:
        logger.info("Generating commit message...")
        # staging can change the set of paths, so read status again
        status = self.ops.read_status() or ctx.status
        ctx.status = status
        diff = self.ops.diff_stat()
        message = self.msg_generator.generate(status.text, diff.stdout if diff.ok else "")
        if message.origin == MessageOrigin.NO_CHANGES:
            logger.info("Nothing left to commit after staging")
            return self._done(ctx, Outcome.UP_TO_DATE)
        ctx.message = message
        logger.info(f"Commit message: {message.text}")
        return RunState.COMMIT

    def _commit(self, ctx: _RunContext) -> RunState:
        logger.info("Committing...")
        result = self.ops.commit(ctx.message.text)
        if not result.ok:
            return self._abort(ctx, Outcome.COMMIT_FAILED, result.text)
        return RunState.PUSH

    def _push(self, ctx: _RunContext) -> RunState:
        logger.info("Pushing to remote...")
        result = self.ops.push()
        if result.ok:
            ctx.push = PushOutcome(succeeded=True, used_upstream_retry=False)
            return self._done(ctx, Outcome.PUSHED)
        logger.warning(f"Push failed, retrying with upstream: {result.text}")
        ctx.detail = result.text
        return RunState.PUSH_RETRY

    def _push_retry(self, ctx: _RunContext) -> RunState:
        branch = self.ops.current_branch()
        if not branch:
            ctx.push = PushOutcome(succeeded=False, used_upstream_retry=False)
            return self._abort(ctx, Outcome.PUSH_FAILED_NO_BRANCH, ctx.detail)

        logger.info(f"Setting upstream to {self.ops.remote}/{branch}...")
        result = self.ops.push_with_upstream(branch)
        if result.ok:
            ctx.push = PushOutcome(succeeded=True, used_upstream_retry=True, branch=branch)
            ctx.detail = None
            return self._done(ctx, Outcome.PUSHED_WITH_UPSTREAM)

        ctx.push = PushOutcome(succeeded=False, used_upstream_retry=True, branch=branch)
        ctx.hints = list(self.PUSH_HINTS)
        return self._abort(ctx, Outcome.PUSH_FAILED, result.text)


def format_summary(result: WorkflowResult) -> str:
    """Human readable end-of-run report."""
    lines = ["=" * 60]
    if result.succeeded:
        lines.append(f"SUCCESS: {result.outcome.value}")
    else:
        lines.append(f"FAILED: {result.outcome.value}")
    lines.append("=" * 60)

    if result.commit_message:
        lines.append(f"Message: {result.commit_message.text}")
    if result.files_changed:
        lines.append(f"Files:   {result.files_changed}")
    if result.push and result.push.branch:
        lines.append(f"Branch:  {result.push.branch}")
    lines.append(f"Status:  {result.outcome.value}")

    if result.detail and not result.succeeded:
        lines.append("")
        lines.append(result.detail)
    if result.hints:
        lines.append("")
        lines.extend(f"- {hint}" for hint in result.hints)

    return "\n".join(lines)
