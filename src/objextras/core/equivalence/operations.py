"""Pure coercion rules for comparing scalar values of different types.

Each rule returns True or False when it applies to the (source, target)
pair and None when it does not, letting the next rule try.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from objextras.core.classifier import is_simple

type Rule = Callable[[Any, Any], bool | None]

_BOOL_TEXT = {"true": True, "false": False}
_BOOL_INT = {1: True, 0: False}


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, (bool, Enum))


def _is_naive(value: datetime) -> bool:
    return value.tzinfo is None or value.utcoffset() is None


def parse_timestamp(text: str) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None if text is not one."""
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError:
        return None


def as_aware(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values are returned unchanged."""
    return value.replace(tzinfo=timezone.utc) if _is_naive(value) else value


def as_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to a naive UTC one; naive values are unchanged."""
    if _is_naive(value):
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def same_instant_and_offset(a: datetime, b: datetime) -> bool:
    """Compare aware datetimes by instant and by UTC offset."""
    return a == b and a.utcoffset() == b.utcoffset()


def compare_bool(source: Any, target: Any) -> bool | None:
    """bool against bool, "true"/"false" text, or 0/1 integers."""
    if not isinstance(source, bool):
        return None
    if isinstance(target, bool):
        return source == target
    if isinstance(target, str):
        parsed = _BOOL_TEXT.get(target.lower())
        return parsed is not None and source is parsed
    if _is_integer(target):
        parsed = _BOOL_INT.get(target)
        return parsed is not None and source is parsed
    return None


def compare_text(source: Any, target: Any) -> bool | None:
    """Text against text, case-sensitive.

    Enum members that are also text (StrEnum) are left to the enum rule.
    """
    if isinstance(source, Enum) or isinstance(target, Enum):
        return None
    if isinstance(source, str) and isinstance(target, str):
        return source == target
    return None


def compare_enum(source: Any, target: Any) -> bool | None:
    """Enum member against an enum member, an integer, or a member name."""
    if not isinstance(source, Enum):
        return None
    if isinstance(target, Enum):
        return bool(source.value == target.value)
    if _is_integer(target):
        return _is_integer(source.value) and source.value == target
    if isinstance(target, str):
        return source.name.casefold() == target.casefold()
    return None


def compare_datetime(source: Any, target: Any) -> bool | None:
    """datetime against datetime or ISO 8601 text.

    Naive values compare field by field. As soon as an offset is involved,
    both sides are made aware (naive = UTC) and must agree on the instant
    and on the offset. Naive source against offset text compares the text's
    UTC instant with the source's fields. Unparseable text is never equal,
    and neither is a value whose UTC conversion falls outside the datetime range.
    """
    if not isinstance(source, datetime):
        return None
    if isinstance(target, str):
        parsed = parse_timestamp(target)
        if parsed is None:
            return False
        try:
            if _is_naive(source):
                return source == as_naive_utc(parsed)
            return same_instant_and_offset(source, as_aware(parsed))
        except OverflowError:
            return False
    if isinstance(target, datetime):
        if _is_naive(source) and _is_naive(target):
            return source == target
        try:
            return same_instant_and_offset(as_aware(source), as_aware(target))
        except OverflowError:
            return False
    return None


def compare_simple(source: Any, target: Any) -> bool | None:
    """Any two scalar-like values, by their text rendering."""
    if is_simple(type(source)) and is_simple(type(target)):
        return str(source) == str(target)
    return None


def _either(rule: Rule) -> Rule:
    def apply(source: Any, target: Any) -> bool | None:
        result = rule(source, target)
        return rule(target, source) if result is None else result

    apply.__name__ = rule.__name__
    return apply


COERCION_RULES: tuple[Rule, ...] = (
    _either(compare_bool),
    compare_text,
    _either(compare_enum),
    _either(compare_datetime),
    compare_simple,
)
"""Rules in evaluation order; the first applicable rule decides."""


def coerce(source: Any, target: Any) -> bool | None:
    """Apply the first coercion rule that handles (source, target).

    Args:
        source: Non-None source value.
        target: Non-None target value.

    Returns:
        The rule's verdict, or None if no rule applies.
    """
    for rule in COERCION_RULES:
        result = rule(source, target)
        if result is not None:
            return result
    return None
