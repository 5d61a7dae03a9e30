"""
Environment validation helpers that raise instead of logging or exiting
"""

from typing import Iterable, Optional

from safe_env.evaluation import evaluate, is_missing
from safe_env.exceptions import MissingEnvironmentError
from safe_env.models import CheckEnvResult
from safe_env.source import Source, resolve_source


def require_env(name: str, source: Optional[Source] = None) -> str:
    """Return the variable's value or raise MissingEnvironmentError."""
    env_source = resolve_source(source)
    if is_missing(env_source, name):
        raise MissingEnvironmentError([name])
    return env_source[name]


def require_envs(
    names: Iterable[str], prefix: Optional[str] = None, source: Optional[Source] = None
) -> CheckEnvResult:
    """Ensure each name has a value; raise MissingEnvironmentError listing every missing one."""
    result = evaluate(names, resolve_source(source, prefix), prefix)
    if not result.success:
        raise MissingEnvironmentError(result.missing)
    return result
