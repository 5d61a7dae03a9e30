"""
Reporting and exit policy for failed checks
"""

import sys
from typing import Optional, Sequence

from safe_env.logging_config import get_logger
from safe_env.models import CheckEnvResult
from safe_env.settings import get_diagnostic_config

EXIT_FAILURE = 1


def format_error_message(
    missing: Sequence[str],
    banner: Optional[str] = None,
    separator: Optional[str] = None,
    marker: Optional[str] = None,
) -> str:
    """
    Render the missing-variables block as one string.

    Layout: blank line, banner, separator, one "<marker> <name>" line per
    missing name, the same separator, trailing newline.
    """
    texts = get_diagnostic_config()
    banner = banner if banner is not None else texts['banner']
    separator = separator if separator is not None else texts['separator']
    marker = marker if marker is not None else texts['marker']

    lines = "\n".join(f"{marker} {name}" for name in missing)
    return f"\n{banner}\n{separator}\n{lines}\n{separator}\n"


def terminate(code: int = EXIT_FAILURE) -> None:
    """End the process with the given status"""
    sys.exit(code)


def report(missing: Sequence[str], exit_on_error: bool = True) -> None:
    """
    Emit the diagnostic for missing names and apply the exit policy.

    Nothing is logged when missing is empty. Otherwise the block is logged
    once, at error level followed by terminate() when exit_on_error is set,
    at warning level when it is not.
    """
    if not missing:
        return

    logger = get_logger(__name__)
    message = format_error_message(missing)

    if exit_on_error:
        logger.error(message, missing=list(missing))
        terminate(EXIT_FAILURE)
        return

    logger.warning(message, missing=list(missing))


def enforce(result: CheckEnvResult, exit_on_error: bool = True) -> CheckEnvResult:
    """Report an already evaluated result and hand it back unless the process ends"""
    report(result.missing, exit_on_error=exit_on_error)
    return result
