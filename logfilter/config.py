"""
Environment configuration for the default LoggerFilter.

Values are read from the process environment, after loading an optional
``.env`` file found from the working directory upwards. Each variable holds a
comma-separated list of field-name patterns:

    LOGFILTER_INCLUDE    extra patterns added to the blacklist
    LOGFILTER_EXCLUDE    default patterns to drop from the blacklist
    LOGFILTER_WHITELIST  patterns that are never redacted

Example .env:
    LOGFILTER_INCLUDE=iban,phone_number
    LOGFILTER_WHITELIST=token_type
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

INCLUDE_ENV = "LOGFILTER_INCLUDE"
EXCLUDE_ENV = "LOGFILTER_EXCLUDE"
WHITELIST_ENV = "LOGFILTER_WHITELIST"


@dataclass(frozen=True)
class FilterSettings:
    """Pattern lists used to build a LoggerFilter."""
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    whitelist_patterns: tuple[str, ...] = ()


def parse_pattern_list(raw: Optional[str]) -> tuple[str, ...]:
    """Split a comma-separated value, dropping blank items."""
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def load_settings() -> FilterSettings:
    """
    Build FilterSettings from the environment.

    Variables already set in the environment take precedence over the
    ones found in ``.env``.
    """
    load_dotenv(find_dotenv(usecwd=True))

    return FilterSettings(
        include_patterns=parse_pattern_list(os.getenv(INCLUDE_ENV)),
        exclude_patterns=parse_pattern_list(os.getenv(EXCLUDE_ENV)),
        whitelist_patterns=parse_pattern_list(os.getenv(WHITELIST_ENV)),
    )
