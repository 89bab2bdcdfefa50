"""
logfilter - Field-name redaction for structured log records

This package removes secrets (passwords, tokens, keys, personal data) from
log records before they are written, by replacing every field whose *name*
looks sensitive with a fixed placeholder.

Architecture:
    - LoggerFilter: Core engine that walks a record and redacts fields
    - BlacklistProfile: Abstract base class supplying default field-name patterns
    - profiles/: Built-in profiles (DEFAULT_PROFILE)
    - RedactingLogFilter: logging.Filter wrapper for standard library loggers

Example:
    from logfilter import LoggerFilter

    log_filter = LoggerFilter(whitelist_patterns=["token_type"])
    safe = log_filter.process({"token": "abc", "token_type": "bearer"})
    # safe: {"token": "*sensitive*", "token_type": "bearer"}
"""

from .engine import LoggerFilter, get_default_filter
from .base_profile import BlacklistProfile
from .logging_filter import RedactingLogFilter

__all__ = ["LoggerFilter", "BlacklistProfile", "RedactingLogFilter", "get_default_filter"]
