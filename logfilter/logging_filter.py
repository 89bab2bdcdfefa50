"""
Logging integration - run the LoggerFilter over standard library log records.

Structured payloads reach a LogRecord in two ways:

    logger.info({"event": "login", "password": "hunter2"})
    logger.info("login %(user)s", {"user": "jane", "token": "abc"})

RedactingLogFilter redacts the dict in ``record.msg`` (first form) and the
mapping in ``record.args`` (second form) before any handler formats them.
Plain string messages are left untouched.
"""

import logging
from typing import Optional

from .engine import LoggerFilter, get_default_filter


class RedactingLogFilter(logging.Filter):
    """Filter that redacts sensitive fields from dict-shaped log payloads."""

    def __init__(self, log_filter: Optional[LoggerFilter] = None, name: str = ""):
        super().__init__(name)
        self._log_filter = log_filter if log_filter is not None else get_default_filter()

    def filter(self, record: logging.LogRecord) -> bool:
        if type(record.msg) is dict:
            record.msg = self._log_filter.process(record.msg)

        if type(record.args) is dict:
            record.args = self._log_filter.process(record.args)

        return True


def install(
    logger: Optional[logging.Logger] = None,
    log_filter: Optional[LoggerFilter] = None,
) -> RedactingLogFilter:
    """
    Attach a RedactingLogFilter to ``logger`` (the root logger by default).

    Logger filters only see records created on that very logger, so the
    filter is also added to each of its handlers: records propagated from
    child loggers are redacted before those handlers emit them. Handlers
    added later are not covered; call install() again after adding one.

    Any RedactingLogFilter already attached is replaced, so calling this
    twice does not redact twice.
    """
    target = logger if logger is not None else logging.getLogger()
    uninstall(target)

    redact_filter = RedactingLogFilter(log_filter)
    target.addFilter(redact_filter)
    for handler in target.handlers:
        handler.addFilter(redact_filter)
    return redact_filter


def uninstall(logger: Optional[logging.Logger] = None) -> None:
    """Remove every RedactingLogFilter from ``logger`` and its handlers."""
    target = logger if logger is not None else logging.getLogger()

    for filterer in [target, *target.handlers]:
        for existing in filterer.filters[:]:
            if isinstance(existing, RedactingLogFilter):
                filterer.removeFilter(existing)
