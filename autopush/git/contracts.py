from dataclasses import dataclass, field
from enum import Enum


SUCCESS_MARKER = "Command executed successfully"


class FailureReason(Enum):
    NON_ZERO_EXIT = "non_zero_exit"
    SPAWN_FAILED = "spawn_failed"


@dataclass
class CommandResult:
    text: str
    ok: bool
    exit_code: int | None = None
    failure: FailureReason | None = None
    stdout: str = ""


@dataclass
class RepositoryStatus:
    text: str
    files: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.text.strip())

    @property
    def file_count(self) -> int:
        return len(self.files)

    @classmethod
    def from_text(cls, text: str) -> "RepositoryStatus":
        files = []
        for line in text.splitlines():
            if not line.strip():
                continue
            path = line[3:] if len(line) > 3 and line[2] == " " else line.strip()
            if " -> " in path:
                path = path.split(" -> ", 1)[1]
            files.append(path.strip())
        return cls(text=text, files=files)


class MessageOrigin(Enum):
    GENERATED = "generated"
    FALLBACK = "fallback"
    NO_CHANGES = "no_changes"


@dataclass(frozen=True)
class CommitMessage:
    text: str
    origin: MessageOrigin


@dataclass
class PushOutcome:
    succeeded: bool
    used_upstream_retry: bool
    branch: str | None = None


class RunState(Enum):
    CHECK_REPO = "check_repo"
    CHECK_CHANGES = "check_changes"
    STAGE = "stage"
    GENERATE_MESSAGE = "generate_message"
    COMMIT = "commit"
    PUSH = "push"
    PUSH_RETRY = "push_retry"
    DONE = "done"
    ABORTED = "aborted"


class Outcome(Enum):
    """Why a run ended where it did."""
    UP_TO_DATE = "up to date"
    PUSHED = "pushed"
    PUSHED_WITH_UPSTREAM = "pushed via upstream retry"
    NOT_A_REPOSITORY = "not a repository"
    STATUS_FAILED = "failed to read status"
    STAGE_FAILED = "failed to stage"
    COMMIT_FAILED = "failed to commit"
    PUSH_FAILED_NO_BRANCH = "push failed, no branch"
    PUSH_FAILED = "push failed"


@dataclass
class WorkflowResult:
    state: RunState
    outcome: Outcome
    commit_message: CommitMessage | None = None
    push: PushOutcome | None = None
    files_changed: int = 0
    detail: str | None = None
    hints: list[str] = field(default_factory=list)
    visited: list[RunState] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state == RunState.DONE

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "state": self.state.value,
            "outcome": self.outcome.value,
            "commit_message": self.commit_message.text if self.commit_message else None,
            "message_origin": self.commit_message.origin.value if self.commit_message else None,
            "push": {
                "succeeded": self.push.succeeded,
                "used_upstream_retry": self.push.used_upstream_retry,
                "branch": self.push.branch,
            } if self.push else None,
            "files_changed": self.files_changed,
            "detail": self.detail,
            "hints": self.hints,
        }
