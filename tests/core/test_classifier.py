"""Tests for type classification.

Critical Invariants:
- Every type falls in exactly one kind
- Text and bytes are leaves, never sequences
- bool and IntEnum are leaves, never plain integers or containers
"""

import array
import functools
from collections import OrderedDict, defaultdict, deque, namedtuple
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum, IntEnum
from pathlib import Path
from uuid import UUID

import pytest

from objextras.core.classifier import (
    TypeKind,
    classify,
    has_leaf_elements,
    is_array,
    is_leaf,
    is_sequence,
    is_simple,
)


class Color(Enum):
    RED = 1


class Level(IntEnum):
    LOW = 1


@dataclass
class Point:
    x: int
    y: int


Pair = namedtuple("Pair", ["left", "right"])


@pytest.mark.parametrize(
    "tp",
    [
        type(None),
        bool,
        int,
        float,
        complex,
        str,
        bytes,
        Decimal,
        date,
        datetime,
        time,
        timedelta,
        timezone,
        UUID,
        Color,
        Level,
        Path,
        range,
        type,
    ],
)
def test_scalars_are_leaves(tp):
    """Scalar-like and shared-by-design types are never traversed."""
    assert classify(tp) is TypeKind.LEAF
    assert is_leaf(tp)


def test_text_is_not_a_sequence():
    """CRITICAL: str is a Sequence in Python but must be a leaf.

    Why: walking text character by character would clone and compare
    single-character strings instead of values.
    """
    assert classify(str) is TypeKind.LEAF
    assert not is_sequence(str)


@pytest.mark.parametrize(
    ("tp", "kind"),
    [
        (tuple, TypeKind.ARRAY),
        (Pair, TypeKind.ARRAY),
        (array.array, TypeKind.ARRAY),
        (bytearray, TypeKind.ARRAY),
        (list, TypeKind.SEQUENCE),
        (deque, TypeKind.SEQUENCE),
        (set, TypeKind.SET),
        (frozenset, TypeKind.SET),
        (dict, TypeKind.MAPPING),
        (OrderedDict, TypeKind.MAPPING),
        (defaultdict, TypeKind.MAPPING),
        (Point, TypeKind.COMPOSITE),
        (object, TypeKind.COMPOSITE),
    ],
)
def test_container_kinds(tp, kind):
    assert classify(tp) is kind


def test_callables_are_their_own_kind():
    """Functions, builtins, bound methods and partials are delegates."""

    def func():
        return None

    assert classify(type(func)) is TypeKind.CALLABLE
    assert classify(type(lambda: 0)) is TypeKind.CALLABLE
    assert classify(type(len)) is TypeKind.CALLABLE
    assert classify(type([].append)) is TypeKind.CALLABLE
    assert classify(type(Point(1, 2).__repr__)) is TypeKind.CALLABLE
    assert classify(functools.partial) is TypeKind.CALLABLE


def test_classes_themselves_are_leaves():
    """Type objects are shared, not copied, even though they are callable."""
    assert classify(type(Point)) is TypeKind.LEAF
    assert classify(type(Color)) is TypeKind.LEAF


def test_simple_is_scalar_subset_of_leaf():
    assert is_simple(datetime)
    assert is_simple(Color)
    assert is_simple(UUID)
    assert not is_simple(type)
    assert not is_simple(list)
    assert is_leaf(type)


def test_array_helpers():
    assert is_array(tuple)
    assert not is_array(list)
    assert is_sequence(tuple)
    assert is_sequence(list)
    assert has_leaf_elements(array.array)
    assert has_leaf_elements(bytearray)
    assert not has_leaf_elements(tuple)


def test_classification_is_deterministic():
    assert classify(Point) is classify(Point)
    assert classify(dict) is TypeKind.MAPPING
