"""
Serialization helpers used by the LoggerFilter.

Small leaf utilities the engine relies on:
    - clone(): independent copy of a log record
    - serialize_error(): turn an exception into a plain, JSON-friendly dict
    - parse_json() / dump_json(): strict JSON decoding with a soft failure mode
"""

import copy
import json
import logging
import math
import re
import traceback
from typing import Any, Optional

logger = logging.getLogger(__name__)

_SURROGATE = re.compile("[\ud800-\udfff]")


def clone(value: Any) -> Any:
    """
    Return an independent copy of a log record.

    Dicts, lists and tuples are rebuilt (shared and circular references are
    preserved). Exceptions are kept by reference so that their traceback is
    still available to serialize_error(). Any other value goes through
    copy.deepcopy; if that fails the original object is kept.

    Args:
        value: The record (or part of it) to copy.

    Returns:
        The copied value.
    """
    return _clone(value, {})


def _clone(value: Any, memo: dict[int, Any]) -> Any:
    if isinstance(value, BaseException):
        return value

    value_id = id(value)
    if value_id in memo:
        return memo[value_id]

    if type(value) is dict:
        result = {}
        memo[value_id] = result
        for key, item in value.items():
            result[key] = _clone(item, memo)
        return result

    if type(value) is list:
        result = []
        memo[value_id] = result
        result.extend(_clone(item, memo) for item in value)
        return result

    if type(value) is tuple:
        items = tuple(_clone(item, memo) for item in value)
        # A nested list may already have cloned this tuple through a cycle
        if value_id in memo:
            return memo[value_id]
        memo[value_id] = items
        return items

    try:
        result = copy.deepcopy(value, memo)
    except Exception as e:
        logger.warning(
            f"Cannot copy {type(value).__name__} value, keeping reference: {e}"
        )
        result = value
    memo[value_id] = result
    return result


def serialize_error(error: BaseException, _seen: Optional[set[int]] = None) -> dict[str, Any]:
    """
    Convert an exception into a plain dict.

    The result always has ``name``, ``message`` and ``stack``. Public
    attributes set on the exception instance are copied as well, and an
    explicitly chained cause (``raise ... from err``) is added as ``cause``.

    Example:
        serialize_error(ValueError("boom"))
        # {"name": "ValueError", "message": "boom", "stack": "ValueError: boom\\n"}
    """
    seen = _seen if _seen is not None else set()
    seen.add(id(error))

    if error.__traceback__ is not None:
        stack = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    else:
        stack = "".join(traceback.format_exception_only(type(error), error))

    result: dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
        "stack": stack,
    }

    for attr, value in vars(error).items():
        if attr.startswith("_") or attr in result:
            continue
        result[attr] = _serialize_attribute(value, seen)

    cause = error.__cause__
    if cause is not None and "cause" not in result:
        result["cause"] = _serialize_attribute(cause, seen)

    return result


def _serialize_attribute(value: Any, seen: set[int]) -> Any:
    if isinstance(value, BaseException):
        if id(value) in seen:
            return "[Circular]"
        return serialize_error(value, seen)
    # Attribute values belong to the caller's exception
    return clone(value)


def parse_json(text: str) -> tuple[bool, Any]:
    """
    Try to decode ``text`` as strict JSON.

    Returns:
        (True, decoded_value) on success, (False, None) otherwise.
        NaN and Infinity literals are rejected like any other invalid JSON.
        Numbers too large for a float (e.g. ``1e400``) decode to None, the
        way JSON.stringify writes non-finite numbers as null.
    """
    try:
        return True, json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_float
        )
    except ValueError:
        return False, None


def dump_json(value: Any) -> str:
    """
    Encode ``value`` compactly, without spaces after separators.

    Non-ASCII text is written as is, unless it contains a lone surrogate:
    the whole document is then escaped so that it stays encodable as UTF-8.
    """
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    if _SURROGATE.search(text):
        text = json.dumps(value, separators=(",", ":"), allow_nan=False)
    return text


def _parse_float(literal: str) -> Optional[float]:
    number = float(literal)
    if math.isfinite(number):
        return number
    return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")
