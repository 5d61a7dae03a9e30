"""
Shared configuration for safe-env

Defaults are read from the packaged defaults.yaml and the logging settings
can be overridden through SAFE_ENV_* environment variables. None of these
settings change which names are reported missing; they only affect how the
diagnostic looks and where it is logged.
"""

import os
import warnings
from typing import Any, Callable, Dict, Optional

import yaml

from safe_env.exceptions import SafeEnvConfigError

DEFAULTS_PATH = os.path.join(os.path.dirname(__file__), 'defaults.yaml')

LOG_FORMATS = ('console', 'json')


def load_defaults(path: Optional[str] = None) -> Dict[str, Any]:
    """Load default configuration values from the YAML defaults file"""
    config_path = path or DEFAULTS_PATH
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SafeEnvConfigError(f"{config_path} must contain a YAML mapping, got {type(data).__name__}")
    return data


DEFAULTS = load_defaults()


class Config:
    """
    Settings for diagnostics and logging.

    Logging:
        - SAFE_ENV_LOG_LEVEL: stdlib level name for the 'safe_env' logger.
          Levels above WARNING are clamped to WARNING so the warning and
          error diagnostics are never silenced.
        - SAFE_ENV_LOG_FORMAT: 'console' for readable blocks, 'json' for log shippers

    Invalid SAFE_ENV_* values fall back to the defaults.yaml value (or
    WARNING / console) with a RuntimeWarning instead of failing the check.

    Diagnostics:
        - banner, separator and marker glyph of the missing-variables block
    """

    DEFAULT_LOG_LEVEL = DEFAULTS.get('logging', {}).get('level', 'WARNING')
    DEFAULT_LOG_FORMAT = DEFAULTS.get('logging', {}).get('format', 'console')

    LOG_LEVEL = os.getenv('SAFE_ENV_LOG_LEVEL', DEFAULT_LOG_LEVEL)
    LOG_FORMAT = os.getenv('SAFE_ENV_LOG_FORMAT', DEFAULT_LOG_FORMAT)

    DIAGNOSTIC_BANNER = DEFAULTS.get('diagnostics', {}).get('banner', 'ENVIRONMENT VARIABLES MISSING')
    DIAGNOSTIC_SEPARATOR = DEFAULTS.get('diagnostics', {}).get('separator', '-' * 35)
    DIAGNOSTIC_MARKER = DEFAULTS.get('diagnostics', {}).get('marker', '-')


def get_diagnostic_config() -> Dict[str, str]:
    """Get the texts used to render the missing-variables block"""
    return {
        'banner': Config.DIAGNOSTIC_BANNER,
        'separator': Config.DIAGNOSTIC_SEPARATOR,
        'marker': Config.DIAGNOSTIC_MARKER,
    }


def _validated_or_default(
    value: Any, default: Any, fallback: str, validate: Callable[[str], str], setting: str
) -> str:
    try:
        return validate(str(value))
    except SafeEnvConfigError as e:
        try:
            replacement = validate(str(default))
        except SafeEnvConfigError:
            replacement = fallback
        warnings.warn(f"{setting}: {e}; using {replacement!r}", RuntimeWarning, stacklevel=3)
        return replacement


def get_logging_config() -> Dict[str, str]:
    """Get the logging level and output format, falling back to defaults on invalid overrides"""
    return {
        'level': _validated_or_default(
            Config.LOG_LEVEL, Config.DEFAULT_LOG_LEVEL, 'WARNING', validate_log_level, 'SAFE_ENV_LOG_LEVEL'
        ),
        'format': _validated_or_default(
            Config.LOG_FORMAT, Config.DEFAULT_LOG_FORMAT, 'console', validate_log_format, 'SAFE_ENV_LOG_FORMAT'
        ),
    }


def validate_log_level(level: str) -> str:
    name = level.strip().upper()
    if name not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        raise SafeEnvConfigError(f"Invalid log level {level!r}")
    return name


def validate_log_format(fmt: str) -> str:
    name = fmt.strip().lower()
    if name not in LOG_FORMATS:
        raise SafeEnvConfigError(f"Invalid log format {fmt!r} (expected one of {', '.join(LOG_FORMATS)})")
    return name
