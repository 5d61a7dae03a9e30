"""
safe-env: fail fast when required environment variables are missing.

    from safe_env import check_env

    check_env(["DATABASE_URL", "API_KEY"])
"""

from safe_env.checker import check_env, check_env_safe, check_env_source
from safe_env.env_checks import require_env, require_envs
from safe_env.exceptions import MissingEnvironmentError, SafeEnvConfigError, SafeEnvError
from safe_env.models import CheckEnvOptions, CheckEnvResult

__version__ = "1.0.0"

__all__ = [
    "check_env",
    "check_env_safe",
    "check_env_source",
    "require_env",
    "require_envs",
    "CheckEnvOptions",
    "CheckEnvResult",
    "MissingEnvironmentError",
    "SafeEnvConfigError",
    "SafeEnvError",
]
