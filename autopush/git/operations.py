from .contracts import CommandResult, RepositoryStatus
from .executor import CommandExecutor


class GitOperations:
    """One method per git query the push workflow needs."""

    def __init__(self, executor: CommandExecutor, remote: str = "origin") -> None:
        self.executor = executor
        self.remote = remote

    def _run(self, *args: str) -> CommandResult:
        return self.executor.execute(["git", *args])

    def probe_repository(self) -> CommandResult:
        return self._run("rev-parse", "--is-inside-work-tree")

    def status(self) -> CommandResult:
        return self._run("status", "--porcelain")

    def read_status(self) -> RepositoryStatus | None:
        """Porcelain status from stdout only, or None when the query itself failed."""
        result = self.status()
        if not result.ok:
            return None
        return RepositoryStatus.from_text(result.stdout)

    def diff_stat(self) -> CommandResult:
        return self._run("diff", "--cached", "--stat")

    def stage_all(self) -> CommandResult:
        return self._run("add", "-A")

    def commit(self, message: str) -> CommandResult:
        return self._run("commit", "-m", message)

    def push(self) -> CommandResult:
        return self._run("push")

    def push_with_upstream(self, branch: str) -> CommandResult:
        return self._run("push", "-u", self.remote, branch)

    def current_branch(self) -> str | None:
        result = self._run("branch", "--show-current")
        if result.ok:
            return result.stdout.strip() or None
        return None
