import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .contracts import SUCCESS_MARKER, CommandResult, FailureReason

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs one external command and folds its outcome into a CommandResult.

    Failures come back as data with ``ok=False``; nothing is raised for a
    command that exits non-zero or cannot be spawned.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def execute(self, args: Sequence[str]) -> CommandResult:
        logger.debug(f"$ {' '.join(args)}")
        try:
            proc = subprocess.run(
                list(args),
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
            )
        except (OSError, ValueError) as e:
            # ValueError: an argument contained a NUL byte
            return CommandResult(
                text=f"Failed to run {args[0]}: {e}",
                ok=False,
                failure=FailureReason.SPAWN_FAILED,
            )

        if proc.returncode != 0:
            text = proc.stderr.strip() or proc.stdout.strip() or f"{args[0]} exited with status {proc.returncode}"
            return CommandResult(
                text=text,
                ok=False,
                exit_code=proc.returncode,
                failure=FailureReason.NON_ZERO_EXIT,
                stdout=proc.stdout,
            )

        return CommandResult(
            text=proc.stdout or proc.stderr or SUCCESS_MARKER,
            ok=True,
            exit_code=0,
            stdout=proc.stdout,
        )
