"""Pure per-kind copy steps used by the clone walker.

Each step receives the original, the context and (for mutable kinds) the
seeded copy, and replaces non-leaf contents with their recursive clones.
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence, MutableSet
from typing import TYPE_CHECKING, Any

from objextras.core.classifier import TypeKind, has_leaf_elements, is_leaf
from objextras.core.reflection import storage_items, write_field
from objextras.errors import CloneError

if TYPE_CHECKING:
    from objextras.core.clone.core import CloneContext

_MUTABLE_ABC = {
    TypeKind.SEQUENCE: MutableSequence,
    TypeKind.SET: MutableSet,
    TypeKind.MAPPING: MutableMapping,
}


def type_name(tp: type) -> str:
    """Qualified name used in error messages."""
    return f"{tp.__module__}.{tp.__qualname__}"


def needs_rebuild(obj: Any, kind: TypeKind) -> bool:
    """Check if obj is an immutable container whose contents must be cloned.

    Immutable containers cannot be seeded and patched in place; a new
    instance is built from the cloned contents instead.

    Args:
        obj: Object to check.
        kind: Classification of type(obj).

    Returns:
        True for tuples, frozensets and other read-only containers.
    """
    if kind is TypeKind.ARRAY:
        return not has_leaf_elements(type(obj))
    mutable = _MUTABLE_ABC.get(kind)
    return mutable is not None and not isinstance(obj, mutable)


def rebuild(obj: Any, kind: TypeKind, context: CloneContext) -> Any:
    """Build a new immutable container from the clones of obj's contents.

    Args:
        obj: Immutable container.
        kind: Classification of type(obj).
        context: Clone context of the current call.

    Returns:
        New instance of type(obj).

    Raises:
        CloneError: If type(obj) cannot be constructed from its contents.
    """
    tp = type(obj)
    if kind is TypeKind.MAPPING:
        contents: Any = {context.copy(key): context.copy(value) for key, value in obj.items()}
    else:
        contents = [context.copy(item) for item in obj]
    try:
        if hasattr(tp, "_make"):
            return tp._make(contents)
        return tp(contents)
    except (TypeError, ValueError) as e:
        raise CloneError(type_name(tp), reason=str(e)) from e


def copy_sequence_items(original: Any, clone: MutableSequence[Any], context: CloneContext) -> None:
    """Replace non-leaf items of a seeded sequence copy with their clones."""
    for index, item in enumerate(original):
        if not is_leaf(type(item)):
            clone[index] = context.copy(item)


def copy_set_items(original: Any, clone: MutableSet[Any], context: CloneContext) -> None:
    """Refill a seeded set copy with the clones of the original's members."""
    members = [context.copy(item) for item in original]
    clone.clear()
    for member in members:
        clone.add(member)


def copy_mapping_items(
    original: Any, clone: MutableMapping[Any, Any], context: CloneContext
) -> None:
    """Refill a seeded mapping copy with cloned keys and values, keeping order."""
    pairs = [(context.copy(key), context.copy(value)) for key, value in original.items()]
    clone.clear()
    for key, value in pairs:
        clone[key] = value


def copy_fields(
    original: Any, clone: Any, context: CloneContext, include_leaves: bool = False
) -> None:
    """Overwrite the instance fields of clone with clones of the original's.

    Leaf-valued fields are skipped unless include_leaves is set, since the
    shallow-copy seed already holds them.

    Args:
        original: Source instance.
        clone: Seeded or rebuilt copy.
        context: Clone context of the current call.
        include_leaves: Also write leaf values (for rebuilt instances).

    Raises:
        CloneError: If a field cannot be written on the copy.
    """
    for item in storage_items(original):
        if not include_leaves and is_leaf(type(item.value)):
            continue
        value = context.copy(item.value)
        try:
            write_field(clone, item, value)
        except (AttributeError, TypeError) as e:
            raise CloneError(type_name(type(original)), item.name, str(e)) from e
