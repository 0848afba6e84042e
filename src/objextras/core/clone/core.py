"""Deep clone of arbitrary object graphs.

Every composite object reachable from the original is copied exactly once:
shared references in the original stay shared in the clone, and reference
cycles are reproduced instead of recursed into forever.

Usage:
    @dataclass
    class Node:
        value: int
        children: list["Node"]

    root = Node(1, [])
    root.children.append(root)

    copy = clone(root)
    assert copy.children[0] is copy
"""

from __future__ import annotations

import copy
from typing import Any, cast

from objextras.core.classifier import TypeKind, classify
from objextras.core.clone import operations
from objextras.core.clone.models import Cloneable
from objextras.core.reflection import shallow_copy
from objextras.errors import CloneError
from objextras.utils.logging_config import get_logger

logger = get_logger(__name__)


class CloneContext:
    """Identity map from original objects to their clones for one clone call.

    Keyed by ``id()``. Originals are held for the lifetime of the context so
    their ids cannot be reused by new objects mid-call.
    """

    def __init__(self) -> None:
        """Initialize an empty identity map."""
        self._clones: dict[int, Any] = {}
        self._originals: list[Any] = []

    def __contains__(self, original: object) -> bool:
        return id(original) in self._clones

    def __len__(self) -> int:
        return len(self._clones)

    def get(self, original: Any) -> Any:
        """Return the clone previously registered for original.

        Raises:
            KeyError: If original has not been cloned in this context.
        """
        return self._clones[id(original)]

    def remember(self, original: Any, clone: Any) -> None:
        """Register clone as the copy of original. First registration wins."""
        key = id(original)
        if key not in self._clones:
            self._originals.append(original)
            self._clones[key] = clone

    def copy(self, obj: Any) -> Any:
        """Clone obj, reusing clones already produced in this context."""
        return _copy(obj, self)


def _seed(obj: Any) -> Any:
    try:
        return shallow_copy(obj)
    except (TypeError, AttributeError, ValueError, copy.Error) as e:
        raise CloneError(operations.type_name(type(obj)), reason=str(e)) from e


def _copy(obj: Any, context: CloneContext) -> Any:
    if obj is None:
        return None

    kind = classify(type(obj))
    if kind is TypeKind.LEAF:
        return obj
    if obj in context:
        return context.get(obj)
    if kind is TypeKind.CALLABLE:
        return None

    if isinstance(obj, Cloneable):
        result = obj.__clone__(context)
        context.remember(obj, result)
        return result

    if operations.needs_rebuild(obj, kind):
        # Contents first: the new instance cannot exist before them
        result = operations.rebuild(obj, kind, context)
        if obj in context:
            # A cycle through the contents already produced this object's clone
            return context.get(obj)
        context.remember(obj, result)
        operations.copy_fields(obj, result, context, include_leaves=True)
        return result

    result = _seed(obj)
    if result is obj:
        # Type hands out itself on copy (singleton); share it untouched
        context.remember(obj, obj)
        return obj

    context.remember(obj, result)
    if kind is TypeKind.SEQUENCE:
        operations.copy_sequence_items(obj, result, context)
    elif kind is TypeKind.SET:
        operations.copy_set_items(obj, result, context)
    elif kind is TypeKind.MAPPING:
        operations.copy_mapping_items(obj, result, context)
    operations.copy_fields(obj, result, context)
    return result


def clone[T](original: T) -> T | None:
    """Return an independent deep copy of original.

    Leaves (numbers, text, date/times, enums, ...) are shared since they are
    immutable. Callables are dropped to None. Everything else is copied
    field by field through every base class, private fields included.

    Args:
        original: Root of the object graph to copy.

    Returns:
        The copy, or None if original is None or a callable.

    Raises:
        CloneError: If some object in the graph cannot be copied. Partial
            copies are never returned.
    """
    if original is None:
        return None
    context = CloneContext()
    try:
        return cast(T | None, context.copy(original))
    except CloneError as e:
        logger.debug("Clone of %s failed: %s", type(original).__name__, e)
        raise
