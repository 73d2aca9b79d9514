import logging
import sys
from pathlib import Path

from .config import API_KEY_VAR, Settings
from .errors import ConfigError, MissingCredentialError
from .git import format_summary
from .runner import run_workflow

logger = logging.getLogger(__name__)

SETUP_HELP = f"""Make sure that:
- a .env file (or your environment) sets {API_KEY_VAR}
- the package is installed: pip install -e .
- you are running inside a git repository"""


def setup_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    numeric = logging.getLevelName(level)
    root.setLevel(numeric if isinstance(numeric, int) else logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> int:
    project_path = Path.cwd()

    try:
        settings = Settings.load(project_path)
    except MissingCredentialError as e:
        print(f"{e}. Add it to .env or export it before running autopush.")
        return 1
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    setup_logging(settings.log_level)

    try:
        result = run_workflow(project_path, settings)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print(SETUP_HELP)
        return 1

    print(format_summary(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
