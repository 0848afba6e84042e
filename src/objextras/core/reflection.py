"""Introspection services shared by the graph walkers.

Python has no single "enumerate all fields" primitive, so instance state is
read from the two places CPython keeps it: the instance ``__dict__`` and the
``__slots__`` descriptors declared anywhere in the MRO. pydantic models keep
their declared fields in ``__dict__`` and their extras and private attributes
in dedicated slots; those are surfaced as ordinary fields for comparison.

Usage:
    for item in storage_items(obj):
        print(item.name, item.value, item.slot)

    fields = instance_fields(user, public_only=True)
"""

from __future__ import annotations

import copy
import functools
import types
import typing
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_PYDANTIC_SLOT_PREFIX = "__pydantic"


@dataclass(slots=True, frozen=True)
class StorageItem:
    """One unit of raw instance storage."""

    name: str
    value: Any
    slot: bool  # False = lives in __dict__


def _is_pydantic_class(cls: type) -> bool:
    """Check if class belongs to pydantic itself (not a user model)."""
    return cls.__module__.split(".", 1)[0] in ("pydantic", "pydantic_core")


def is_pydantic_model(obj: Any) -> bool:
    """Check if obj is a pydantic model instance without importing pydantic.

    Args:
        obj: Object to check.

    Returns:
        True if the object's class inherits from pydantic.BaseModel.
    """
    for base in type(obj).__mro__:
        if _is_pydantic_class(base) and base.__name__ == "BaseModel":
            return True
    return False


def _mangle(owner: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{owner.__name__.lstrip('_')}{name}"
    return name


@functools.lru_cache(maxsize=None)
def slot_names(cls: type) -> tuple[str, ...]:
    """Attribute names of every slot declared in the class hierarchy.

    Private slot names are returned in their name-mangled form, which is how
    the slot descriptors are stored on the class.

    Args:
        cls: Class to inspect.

    Returns:
        Slot attribute names, most-derived class first, without duplicates.
    """
    names: list[str] = []
    for klass in cls.__mro__:
        declared = klass.__dict__.get("__slots__", ())
        if isinstance(declared, str):
            declared = (declared,)
        for name in declared:
            if name in ("__dict__", "__weakref__"):
                continue
            mangled = _mangle(klass, name)
            if mangled not in names:
                names.append(mangled)
    return tuple(names)


@functools.lru_cache(maxsize=None)
def property_names(cls: type) -> tuple[str, ...]:
    """Names of readable properties declared outside pydantic's base classes."""
    names: list[str] = []
    for klass in cls.__mro__:
        if klass is object or _is_pydantic_class(klass):
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fget is not None and name not in names:
                names.append(name)
    return tuple(names)


def storage_items(obj: Any) -> Iterator[StorageItem]:
    """Iterate over the raw instance storage of obj.

    Unset slots are skipped. The ``__dict__`` snapshot is taken up front so
    callers may write back into the instance while iterating.

    Args:
        obj: Instance to inspect.

    Yields:
        StorageItem for every ``__dict__`` entry, then every set slot.
    """
    try:
        state = object.__getattribute__(obj, "__dict__")
    except AttributeError:
        state = None
    if isinstance(state, dict):
        for name, value in list(state.items()):
            yield StorageItem(name, value, slot=False)

    for name in slot_names(type(obj)):
        try:
            value = object.__getattribute__(obj, name)
        except AttributeError:
            continue
        yield StorageItem(name, value, slot=True)


def _public(name: str) -> bool:
    return not name.startswith("_")


def instance_fields(obj: Any, public_only: bool = False) -> dict[str, Any]:
    """Logical fields of obj, by name.

    For pydantic models this is declared fields, extras and private
    attributes; pydantic's bookkeeping slots are left out. For everything
    else it is the raw instance storage.

    Args:
        obj: Instance to inspect.
        public_only: Drop names starting with an underscore.

    Returns:
        Mapping of field name to current value.
    """
    if is_pydantic_model(obj):
        fields = dict(obj.__dict__)
        fields.update(getattr(obj, "__pydantic_extra__", None) or {})
        fields.update(getattr(obj, "__pydantic_private__", None) or {})
    else:
        fields = {
            item.name: item.value
            for item in storage_items(obj)
            if not item.name.startswith(_PYDANTIC_SLOT_PREFIX)
        }
    if public_only:
        return {name: value for name, value in fields.items() if _public(name)}
    return fields


def instance_properties(obj: Any, public_only: bool = False) -> dict[str, Any]:
    """Current values of the readable properties of obj.

    Exceptions raised by property getters propagate.

    Args:
        obj: Instance to inspect.
        public_only: Drop names starting with an underscore.

    Returns:
        Mapping of property name to value.
    """
    return {
        name: getattr(obj, name)
        for name in property_names(type(obj))
        if not public_only or _public(name)
    }


def shallow_copy(obj: Any) -> Any:
    """Memberwise copy of obj: same type, same field references."""
    return copy.copy(obj)


def write_field(obj: Any, item: StorageItem, value: Any) -> None:
    """Store value into the storage location item was read from.

    Bypasses ``__setattr__`` so frozen dataclasses and pydantic models can be
    populated.
    """
    if item.slot:
        object.__setattr__(obj, item.name, value)
    else:
        object.__getattribute__(obj, "__dict__")[item.name] = value


def create_default[T](tp: type[T]) -> T:
    """Instantiate tp with its no-argument constructor."""
    return tp()


def _model_fields(cls: type) -> dict[str, Any]:
    fields = getattr(cls, "__pydantic_fields__", None)
    if fields is None:
        fields = getattr(cls, "model_fields", None)
    return fields if isinstance(fields, dict) else {}


def member_names(obj: Any) -> list[str]:
    """Every member name known for obj: fields, slots, properties, model fields."""
    cls = type(obj)
    names = list(instance_fields(obj))
    names.extend(name for name in slot_names(cls) if not name.startswith(_PYDANTIC_SLOT_PREFIX))
    names.extend(property_names(cls))
    names.extend(_model_fields(cls))
    return list(dict.fromkeys(names))


def find_member(obj: Any, name: str) -> str | None:
    """Resolve name to a member of obj, exact match first, then case-insensitive.

    Args:
        obj: Instance to search.
        name: Member name in any case.

    Returns:
        The member's actual name, or None if obj has no such member.
    """
    names = member_names(obj)
    if name in names:
        return name
    folded = name.casefold()
    for candidate in names:
        if candidate.casefold() == folded:
            return candidate
    return None


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def member_type(cls: type, name: str) -> type | None:
    """Declared class of a member, if it can be determined.

    Looks at pydantic field annotations, class type hints, and property
    return annotations, in that order. ``X | None`` resolves to ``X``.

    Args:
        cls: Owning class.
        name: Member name.

    Returns:
        The declared class, or None for unannotated or non-class annotations.
    """
    annotation: Any = None
    model_fields = _model_fields(cls)
    if model_fields and name in model_fields:
        annotation = model_fields[name].annotation
    else:
        try:
            hints = typing.get_type_hints(cls)
        except (NameError, TypeError):
            hints = {}
        annotation = hints.get(name)
        if annotation is None:
            attr = getattr(cls, name, None)
            if isinstance(attr, property) and attr.fget is not None:
                try:
                    annotation = typing.get_type_hints(attr.fget).get("return")
                except (NameError, TypeError):
                    annotation = None
    annotation = _unwrap_optional(annotation)
    if typing.get_origin(annotation) is not None or not isinstance(annotation, type):
        return None
    return annotation
