"""
Source resolution: pick the mapping a check runs against
"""

import os
from typing import Mapping, Optional

Source = Mapping[str, Optional[str]]


def resolve_source(source: Optional[Source] = None, prefix: Optional[str] = None) -> Source:
    """
    Return the mapping to inspect.

    The explicit source is used as-is when given, otherwise os.environ. With a
    non-empty prefix a new dict holding only the keys that start with it is
    returned; the base mapping is never modified.
    """
    env_source = source if source is not None else os.environ

    if not prefix:
        return env_source

    return {key: value for key, value in env_source.items() if key.startswith(prefix)}
