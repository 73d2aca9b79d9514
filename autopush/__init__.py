from .config import Settings
from .errors import AutoPushError, ConfigError, GenerationError, MissingCredentialError
from .runner import run_workflow

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "AutoPushError",
    "ConfigError",
    "GenerationError",
    "MissingCredentialError",
    "run_workflow",
]
