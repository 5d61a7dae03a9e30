"""
Exceptions raised by safe-env
"""

from typing import Iterable


class SafeEnvError(Exception):
    """Base class for safe-env errors"""


class SafeEnvConfigError(SafeEnvError):
    """Invalid safe-env configuration (defaults file or SAFE_ENV_* overrides)"""


class MissingEnvironmentError(SafeEnvError, RuntimeError):
    """Raised by the require_* helpers when required variables are absent or empty"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing)}")
