"""
LoggerFilter - Core engine for redacting sensitive fields from log records.

This engine orchestrates:
1. Building a blacklist from profile patterns plus caller overrides
2. Walking a cloned record and replacing sensitive fields with a placeholder
3. Breaking circular references so any record can be walked safely

Redaction is driven by field *names* only: the value of a field is never
inspected to decide whether it is sensitive.

Thread-safe: configuration is frozen at construction and every call works
on its own copy of the record.
"""

import logging
from typing import Any, Iterable, Optional

from .base_profile import BlacklistProfile
from .config import load_settings
from .profiles import DEFAULT_PROFILE
from .serialization import clone, dump_json, parse_json, serialize_error

logger = logging.getLogger(__name__)

PLACEHOLDER = "*sensitive*"
ROOT_PATH = "~"


class LoggerFilter:
    """
    Engine for redacting sensitive fields from structured log records.

    A field is redacted when its name contains a blacklist pattern and no
    whitelist pattern (case-insensitive substring match). The redacted value
    is replaced by the placeholder as a whole, nested structures included.

    Example:
        log_filter = LoggerFilter(include_patterns=["iban"])

        log_filter.process({"user": "jane", "password": "hunter2"})
        # {"user": "jane", "password": "*sensitive*"}

        log_filter.process({"body": '{"iban":"DE89370400440532013000"}'})
        # {"body": '{"iban":"*sensitive*"}'}

    Values are handled as follows once the field name itself is allowed:
        - exceptions become {"name", "message", "stack", ...} dicts
        - dicts are redacted recursively
        - strings holding JSON are decoded, redacted and re-encoded
        - lists and tuples have every element checked against the
          field name that holds them
        - anything else is returned unchanged
    """

    def __init__(
        self,
        include_patterns: Iterable[str] = (),
        exclude_patterns: Iterable[str] = (),
        whitelist_patterns: Iterable[str] = (),
        profiles: Optional[Iterable[BlacklistProfile]] = None,
    ):
        """
        Initialize the LoggerFilter.

        Args:
            include_patterns: Patterns added to the end of the blacklist.
            exclude_patterns: Default patterns removed from the blacklist.
                              Only exact matches against a default pattern
                              have an effect.
            whitelist_patterns: Patterns that exempt a field from redaction,
                                even when it matches the blacklist.
            profiles: Profiles supplying the default patterns. Defaults to
                      the built-in DEFAULT_PROFILE; pass [] for a clean slate.
        """
        if profiles is None:
            profiles = [DEFAULT_PROFILE]
        self._profiles = tuple(profiles)

        self._blacklist = self._generate_blacklist(
            list(include_patterns), list(exclude_patterns)
        )
        self._whitelist = tuple(whitelist_patterns)

        self._blacklist_lower = tuple(p.lower() for p in self._blacklist)
        self._whitelist_lower = tuple(p.lower() for p in self._whitelist)

        logger.debug(
            f"LoggerFilter configured with {len(self._blacklist)} blacklist and "
            f"{len(self._whitelist)} whitelist patterns "
            f"(profiles: {', '.join(p.name for p in self._profiles) or 'none'})"
        )

    @classmethod
    def from_env(cls, profiles: Optional[Iterable[BlacklistProfile]] = None) -> "LoggerFilter":
        """Build a LoggerFilter from LOGFILTER_* environment variables."""
        settings = load_settings()
        return cls(
            include_patterns=settings.include_patterns,
            exclude_patterns=settings.exclude_patterns,
            whitelist_patterns=settings.whitelist_patterns,
            profiles=profiles,
        )

    @property
    def blacklist(self) -> tuple[str, ...]:
        return self._blacklist

    @property
    def whitelist(self) -> tuple[str, ...]:
        return self._whitelist

    @property
    def placeholder(self) -> str:
        return PLACEHOLDER

    def process(self, record: Any = None) -> dict[Any, Any]:
        """
        Return a redacted copy of a log record.

        Args:
            record: The record to sanitize. Only a plain dict is processed;
                    None, primitives, lists, exceptions and instances of any
                    other class yield an empty dict.

        Returns:
            A new dict with sensitive fields replaced by the placeholder.
            The input record is never modified.
        """
        if type(record) is not dict:
            return {}

        return self._filter_object(clone(record), ROOT_PATH, {})

    def _filter_object(self, item: dict, path: str, ancestors: dict[int, str]) -> dict:
        ancestors[id(item)] = path
        try:
            return {
                key: self._filter_item(key, value, f"{path}.{key}", ancestors)
                for key, value in item.items()
            }
        finally:
            del ancestors[id(item)]

    def _filter_item(self, key: Any, item: Any, path: str, ancestors: dict[int, str]) -> Any:
        # A sensitive field is collapsed whatever it holds
        if self._is_on_blacklist(key) and not self._is_on_whitelist(key):
            return PLACEHOLDER

        if _is_container(item) and id(item) in ancestors:
            return f"[Circular {ancestors[id(item)]}]"

        if isinstance(item, BaseException):
            return serialize_error(item)

        if _is_plain_mapping(item):
            return self._filter_object(item, path, ancestors)

        if isinstance(item, str):
            is_json, decoded = parse_json(item)
            if is_json:
                return dump_json(self._filter_item(key, decoded, path, ancestors))
            return item

        if type(item) in (list, tuple):
            return self._filter_sequence(key, item, path, ancestors)

        return item

    def _filter_sequence(self, key: Any, items: Any, path: str, ancestors: dict[int, str]) -> Any:
        # Elements are judged by the name of the field holding the sequence
        ancestors[id(items)] = path
        try:
            filtered = [
                self._filter_item(key, item, f"{path}.{index}", ancestors)
                for index, item in enumerate(items)
            ]
        finally:
            del ancestors[id(items)]

        if type(items) is tuple:
            return tuple(filtered)
        return filtered

    def _is_on_blacklist(self, key: Any) -> bool:
        name = str(key).lower()
        return any(pattern in name for pattern in self._blacklist_lower)

    def _is_on_whitelist(self, key: Any) -> bool:
        name = str(key).lower()
        return any(pattern in name for pattern in self._whitelist_lower)

    def _generate_blacklist(
        self, include_patterns: list[str], exclude_patterns: list[str]
    ) -> tuple[str, ...]:
        defaults = [
            pattern
            for profile in self._profiles
            for pattern in profile.get_patterns()
        ]
        kept = [pattern for pattern in defaults if pattern not in exclude_patterns]
        return tuple(kept + include_patterns)


def _is_plain_mapping(value: Any) -> bool:
    # dict subclasses carry behaviour of their own and are left alone
    return type(value) is dict


def _is_container(value: Any) -> bool:
    return type(value) in (dict, list, tuple)


# Singleton instance for convenience
_default_filter: Optional[LoggerFilter] = None


def get_default_filter() -> LoggerFilter:
    """
    Get the default LoggerFilter instance.

    Built on first use from the LOGFILTER_* environment variables.
    For more control, instantiate LoggerFilter directly.
    """
    global _default_filter
    if _default_filter is None:
        _default_filter = LoggerFilter.from_env()
        logger.info(
            f"Default LoggerFilter ready ({len(_default_filter.blacklist)} blacklist patterns)"
        )
    return _default_filter


def reset_default_filter() -> None:
    """Forget the default instance so the next call rebuilds it."""
    global _default_filter
    _default_filter = None
