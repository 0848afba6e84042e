"""Type classification for the clone and equivalence walkers.

Classification is by type, not by value, and is cached per type.

Usage:
    classify(int)                  # TypeKind.LEAF
    classify(list)                 # TypeKind.SEQUENCE
    classify(type(some_object))    # TypeKind.COMPOSITE
    is_simple(datetime)            # True
"""

from __future__ import annotations

import array
import datetime
import functools
import pathlib
import types
import uuid
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from fractions import Fraction

from objextras.core.classifier.models import TypeKind

SIMPLE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    datetime.date,  # also covers datetime.datetime
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    Enum,
    pathlib.PurePath,
)
"""Scalar-like types compared by value (and by text rendering as a fallback)."""

LEAF_TYPES: tuple[type, ...] = SIMPLE_TYPES + (
    type(None),
    datetime.tzinfo,
    range,
    type,
    types.ModuleType,
    types.EllipsisType,
    types.NotImplementedType,
)
"""Immutable or shared-by-design types the walkers never descend into."""

CALLABLE_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    functools.partial,
)

ARRAY_TYPES: tuple[type, ...] = (tuple, array.array, bytearray)

_LEAF_ELEMENT_ARRAYS: tuple[type, ...] = (array.array, bytearray)


@functools.lru_cache(maxsize=None)
def classify(tp: type) -> TypeKind:
    """Classify a runtime type.

    Checks run from most to least specific: ``str`` and ``bytes`` are
    sequences, ``bool`` is an int and named tuples are tuples, so the order
    below is significant.

    Args:
        tp: Type to classify.

    Returns:
        The TypeKind that decides how the walkers treat instances of tp.
    """
    if issubclass(tp, LEAF_TYPES):
        return TypeKind.LEAF
    if issubclass(tp, CALLABLE_TYPES):
        return TypeKind.CALLABLE
    if issubclass(tp, ARRAY_TYPES):
        return TypeKind.ARRAY
    if issubclass(tp, Mapping):
        return TypeKind.MAPPING
    if issubclass(tp, Set):
        return TypeKind.SET
    if issubclass(tp, Sequence):
        return TypeKind.SEQUENCE
    return TypeKind.COMPOSITE


def is_leaf(tp: type) -> bool:
    """Check if instances of tp are copied by value and never traversed."""
    return classify(tp) is TypeKind.LEAF


def is_simple(tp: type) -> bool:
    """Check if tp is a scalar-like type (number, text, date/time, UUID, enum, path)."""
    return issubclass(tp, SIMPLE_TYPES)


def is_array(tp: type) -> bool:
    """Check if tp is a fixed-length vector type."""
    return classify(tp) is TypeKind.ARRAY


def is_sequence(tp: type) -> bool:
    """Check if tp is ordinal-indexed (arrays included)."""
    return classify(tp) in (TypeKind.ARRAY, TypeKind.SEQUENCE)


def has_leaf_elements(tp: type) -> bool:
    """Check if tp is an array type whose elements are always leaves."""
    return issubclass(tp, _LEAF_ELEMENT_ARRAYS)
