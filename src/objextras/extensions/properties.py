"""Compound property paths and emptiness checks.

Member names are case-insensitive and may be compound, separated by periods
or slashes: ``"Name.GivenName"``, ``"manager/sponsor/name"``.

Usage:
    set_property_value(employee, "manager.sponsor.name.surname", "Smith")
    get_property_value(employee, "Manager.Sponsor.Name.Surname")  # "Smith"

    is_empty(Employee())  # True
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any

from objextras.core.classifier import TypeKind, classify, is_leaf
from objextras.core.reflection import (
    create_default,
    find_member,
    instance_fields,
    instance_properties,
    member_type,
)
from objextras.errors import PropertyPathError
from objextras.utils.logging_config import get_logger

logger = get_logger(__name__)

_MISSING = object()


def normalize_property_name(name: str) -> str:
    """Convert slashes to periods in a compound property name."""
    return name.replace("/", ".")


def get_property_value(source: Any, name: str) -> Any:
    """Return the value of an immediate or nested member.

    Args:
        source: Object that owns the member.
        name: Member name, case-insensitive, possibly compound.

    Returns:
        The member value, or None if source is None, any member on the path
        does not exist, or an intermediate member is None.
    """
    if source is None:
        return None

    head, _, rest = normalize_property_name(name).partition(".")
    member = find_member(source, head)
    if member is None:
        logger.debug("%s has no member '%s'", type(source).__name__, head)
        return None

    value = getattr(source, member, None)
    return get_property_value(value, rest) if rest else value


def _create_intermediate(owner: Any, member: str, path: str) -> Any:
    tp = member_type(type(owner), member)
    if tp is None or is_leaf(tp):
        logger.debug("Cannot create %s.%s: no class annotation", type(owner).__name__, member)
        return None
    try:
        value = create_default(tp)
    except (TypeError, ValueError) as e:
        raise PropertyPathError(path, f"cannot create {tp.__qualname__} for '{member}'") from e
    setattr(owner, member, value)
    return value


def set_property_value(target: Any, name: str, value: Any) -> None:
    """Set an immediate or nested member, creating missing parents.

    A None intermediate member whose declared type is a class is replaced by
    a default instance of that class. Members that do not exist are ignored.

    Args:
        target: Object that owns the member; None is a no-op.
        name: Member name, case-insensitive, possibly compound.
        value: New value.

    Raises:
        PropertyPathError: If a missing intermediate object cannot be
            default-constructed.
    """
    if target is None:
        return

    path = normalize_property_name(name)
    *parents, last = path.split(".")
    current = target
    for part in parents:
        member = find_member(current, part)
        if member is None:
            logger.debug("%s has no member '%s'", type(current).__name__, part)
            return
        child = getattr(current, member, None)
        if child is None:
            child = _create_intermediate(current, member, path)
            if child is None:
                return
        current = child

    member = find_member(current, last)
    if member is None:
        logger.debug("%s has no member '%s'", type(current).__name__, last)
        return
    setattr(current, member, value)


def _is_empty(value: Any, public_only: bool, seen: set[int]) -> bool:
    if value is None:
        return True
    if classify(type(value)) in (TypeKind.LEAF, TypeKind.CALLABLE):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    if isinstance(value, Iterable):
        return next(iter(value), _MISSING) is _MISSING

    if id(value) in seen:
        return True
    seen.add(id(value))
    members = instance_properties(value, public_only) | instance_fields(value, public_only)
    return all(_is_empty(member, public_only, seen) for member in members.values())


def is_empty(source: Any, public_only: bool = False) -> bool:
    """Check whether source holds no data.

    None is empty. Scalars (including empty strings) and callables are not.
    Collections are empty when they have no items. Other objects are empty
    when every property and field holds an empty value.

    Args:
        source: Object to check.
        public_only: Only look at members without a leading underscore.

    Returns:
        True if source is empty, otherwise False.
    """
    return _is_empty(source, public_only, set())
