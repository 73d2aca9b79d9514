from collections import defaultdict
from typing import Sequence

from autopush.git.contracts import CommandResult, FailureReason


def ok(text: str = "") -> CommandResult:
    return CommandResult(text=text or "Command executed successfully", ok=True, exit_code=0, stdout=text)


def ok_with_stderr(stderr: str) -> CommandResult:
    """Successful command that printed nothing to stdout."""
    return CommandResult(text=stderr, ok=True, exit_code=0, stdout="")


def fail(text: str = "fatal: error") -> CommandResult:
    return CommandResult(text=text, ok=False, exit_code=128, failure=FailureReason.NON_ZERO_EXIT)


class ScriptedExecutor:
    """Returns queued results per git command and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self._results: dict[tuple[str, ...], list[CommandResult]] = defaultdict(list)

    def on(self, *args: str, result: CommandResult) -> "ScriptedExecutor":
        self._results[("git", *args)].append(result)
        return self

    def execute(self, args: Sequence[str]) -> CommandResult:
        key = tuple(args)
        self.calls.append(key)
        queue = self._results.get(key)
        if not queue:
            return ok()
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def count(self, *args: str) -> int:
        return self.calls.count(("git", *args))

    def count_prefix(self, *args: str) -> int:
        prefix = ("git", *args)
        return sum(1 for call in self.calls if call[:len(prefix)] == prefix)


class StubGenerator:
    def __init__(self, reply: str = "feat: update file.txt", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


