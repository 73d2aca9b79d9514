"""Runtime settings read from the environment and the project's .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .errors import ConfigError, MissingCredentialError

API_KEY_VAR = "GEMINI_API_KEY"


@dataclass
class Settings:
    api_key: str
    model: str = "gemini-1.5-flash"
    remote: str = "origin"
    timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def load(cls, project_path: Path) -> "Settings":
        """Build settings for a run in ``project_path``.

        Values already present in the environment take precedence over the
        project's .env file. The process environment is never modified, so
        one project's .env cannot leak into the next load.
        """
        file_values = {k: v for k, v in dotenv_values(project_path / ".env").items() if v is not None}
        env = {**file_values, **os.environ}

        api_key = env.get(API_KEY_VAR, "").strip()
        if not api_key:
            raise MissingCredentialError(API_KEY_VAR)

        raw_timeout = env.get("AUTOPUSH_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else cls.timeout
        except ValueError:
            raise ConfigError(f"AUTOPUSH_TIMEOUT must be a number, got {raw_timeout!r}") from None

        return cls(
            api_key=api_key,
            model=env.get("AUTOPUSH_MODEL", "").strip() or cls.model,
            remote=env.get("AUTOPUSH_REMOTE", "").strip() or cls.remote,
            timeout=timeout,
            log_level=(env.get("AUTOPUSH_LOG_LEVEL", "").strip() or cls.log_level).upper(),
        )
