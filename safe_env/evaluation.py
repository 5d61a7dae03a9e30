"""
Evaluation of required names against a resolved source.

Nothing here reads os.environ or has side effects; callers resolve the
source first (see safe_env.source) and decide what to do with the result.
"""

from typing import Iterable, List, Optional

from safe_env.models import CheckEnvResult
from safe_env.source import Source


def filter_required_names(required_names: Iterable[str], prefix: Optional[str] = None) -> List[str]:
    """Keep only the names starting with prefix; all names when prefix is empty"""
    if not prefix:
        return list(required_names)
    return [name for name in required_names if name.startswith(prefix)]


def is_missing(source: Source, name: str) -> bool:
    # Absent, None and "" all count as missing.
    return not source.get(name)


def evaluate(required_names: Iterable[str], source: Source, prefix: Optional[str] = None) -> CheckEnvResult:
    """
    Compute which required names are missing from source.

    Args:
        required_names: names to check, in the order they should be reported
        source: resolved mapping (already narrowed by resolve_source)
        prefix: names not starting with it are dropped and never reported

    Returns:
        CheckEnvResult with missing names in input order, duplicates kept
    """
    names_to_check = filter_required_names(required_names, prefix)
    missing = [name for name in names_to_check if is_missing(source, name)]
    return CheckEnvResult.from_missing(missing)
