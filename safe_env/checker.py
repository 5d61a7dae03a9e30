"""
Entry points for checking required environment variables.

check_env is the full contract and the only variant that can terminate the
process; check_env_safe never does; check_env_source treats every key of a
mapping as required.
"""

from typing import Any, Dict, Iterable, Optional, Union

from safe_env.evaluation import evaluate
from safe_env.models import CheckEnvOptions, CheckEnvResult
from safe_env.report import enforce
from safe_env.source import Source, resolve_source

OptionsLike = Union[CheckEnvOptions, Dict[str, Any], None]


def _build_options(options: OptionsLike, overrides: Dict[str, Any]) -> CheckEnvOptions:
    if options is None:
        base = CheckEnvOptions()
    elif isinstance(options, CheckEnvOptions):
        base = options
    else:
        base = CheckEnvOptions.model_validate(options)

    if not overrides:
        return base
    return CheckEnvOptions.model_validate({**base.model_dump(exclude_unset=True), **overrides})


def check_env(required_names: Iterable[str], options: OptionsLike = None, **overrides: Any) -> CheckEnvResult:
    """
    Check that every required name has a non-empty value.

    Args:
        required_names: variable names the caller needs
        options: CheckEnvOptions or an equivalent dict
        **overrides: prefix, source or exit_on_error, applied on top of options

    Returns:
        CheckEnvResult; when variables are missing and exit_on_error is True
        the error diagnostic is logged and the process exits with status 1
        instead of returning
    """
    opts = _build_options(options, overrides)

    env_source = resolve_source(opts.source, opts.prefix)
    result = evaluate(required_names, env_source, opts.prefix)

    return enforce(result, exit_on_error=opts.exit_on_error)


def check_env_safe(required_names: Iterable[str], options: OptionsLike = None, **overrides: Any) -> CheckEnvResult:
    """Same as check_env but never exits; missing variables are logged as a warning"""
    opts = _build_options(options, overrides)
    return check_env(required_names, opts, exit_on_error=False)


def check_env_source(source: Source, options: OptionsLike = None, **overrides: Any) -> CheckEnvResult:
    """Check that every key of source has a non-empty value; any source in options is ignored"""
    opts = _build_options(options, overrides)
    required_names = list(source.keys())
    return check_env(required_names, opts, source=dict(source))
