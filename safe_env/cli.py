#!/usr/bin/env python3
"""
Command-line check for required environment variables

Examples:
    safe-env DATABASE_URL REDIS_URL
    safe-env --prefix NEXT_ NEXT_API_URL NEXT_SECRET --safe
    safe-env --env-file .env.production
"""

import argparse
import json
import os
from typing import List, Optional

from dotenv import dotenv_values

from safe_env.checker import check_env, check_env_safe, check_env_source
from safe_env.exceptions import SafeEnvConfigError
from safe_env.logging_config import configure_logging
from safe_env.settings import LOG_FORMATS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='safe-env',
        description="Fail fast when required environment variables are missing or empty",
    )
    parser.add_argument('names', nargs='*', metavar='NAME',
                        help='Required variable names')
    parser.add_argument('--prefix', default=None,
                        help='Only check names (and source keys) starting with this prefix')
    parser.add_argument('--env-file', default=None,
                        help='Check against a .env file instead of the process environment')
    parser.add_argument('--safe', action='store_true',
                        help='Warn instead of exiting with status 1')
    parser.add_argument('--log-level', default=None,
                        help='Log level for diagnostics (default: SAFE_ENV_LOG_LEVEL or WARNING)')
    parser.add_argument('--log-format', default=None, choices=LOG_FORMATS,
                        help='Diagnostic output format')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.names and not args.env_file:
        parser.error('provide at least one NAME or --env-file')

    if args.env_file and not os.path.isfile(args.env_file):
        parser.error(f'env file not found: {args.env_file}')

    if args.log_level or args.log_format:
        try:
            configure_logging(level=args.log_level, fmt=args.log_format, force=True)
        except SafeEnvConfigError as e:
            parser.error(str(e))

    source = dict(dotenv_values(args.env_file)) if args.env_file else None
    exit_on_error = not args.safe

    if args.names:
        check = check_env_safe if args.safe else check_env
        result = check(args.names, prefix=args.prefix, source=source)
    else:
        result = check_env_source(source, prefix=args.prefix, exit_on_error=exit_on_error)

    print(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
