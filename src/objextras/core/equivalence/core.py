"""Structural equivalence of arbitrary object graphs.

Two graphs are equivalent when they hold the same data, regardless of
object identity or exact runtime types: an ``int`` 1 matches a ``bool``
True, a list matches a tuple with equivalent items, and two unrelated
classes match when their same-named members do.

Usage:
    is_equivalent_to(user, clone(user))              # True
    is_equivalent_to(True, "TRUE")                   # True
    is_equivalent_to([1, 2, 3], (3, 2, 1))           # False: order matters

    # None on the source side means "not specified"
    patch = User(name=None, mail="new@mail.com")
    is_equivalent_to(patch, user, ignore_null_source=True)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from objextras.core.classifier import TypeKind, classify
from objextras.core.equivalence import operations
from objextras.core.equivalence.models import ComparisonPolicy, StructurallyComparable
from objextras.core.reflection import instance_fields, instance_properties, property_names
from objextras.utils.logging_config import get_logger

logger = get_logger(__name__)

_STRUCTURAL_KINDS = frozenset(
    {TypeKind.ARRAY, TypeKind.SEQUENCE, TypeKind.SET, TypeKind.MAPPING, TypeKind.COMPOSITE}
)
_ORDERED_KINDS = frozenset({TypeKind.ARRAY, TypeKind.SEQUENCE})


class EquivalenceContext:
    """Policy and cycle guard for one equivalence call.

    The guard holds the (source, target) identity pairs currently being
    compared. Meeting a pair again means the graphs loop back onto
    themselves in the same way, so the pair is assumed equivalent.
    """

    def __init__(self, policy: ComparisonPolicy):
        """Initialize context.

        Args:
            policy: Comparison policy applied at every level.
        """
        self.policy = policy
        self._active: set[tuple[int, int]] = set()

    def compare(self, source: Any, target: Any) -> bool:
        """Compare two values under this context's policy."""
        return _compare(source, target, self)

    def counts_match(self, source_count: int, target_count: int) -> bool:
        """Check collection sizes: equal, or source shorter when nulls are ignored."""
        if self.policy.ignore_null_source:
            return source_count <= target_count
        return source_count == target_count


def _compare(source: Any, target: Any, context: EquivalenceContext) -> bool:
    if source is None and target is None:
        return True
    if source is None and context.policy.ignore_null_source:
        return True
    if source is None or target is None:
        return False
    if source is target:
        return True

    coerced = operations.coerce(source, target)
    if coerced is not None:
        return coerced

    source_kind = classify(type(source))
    target_kind = classify(type(target))
    if source_kind not in _STRUCTURAL_KINDS or target_kind not in _STRUCTURAL_KINDS:
        return bool(source == target)

    key = (id(source), id(target))
    if key in context._active:
        logger.debug(
            "Cycle between %s and %s, assuming equivalent",
            type(source).__name__,
            type(target).__name__,
        )
        return True
    context._active.add(key)
    try:
        return _compare_structures(source, target, source_kind, target_kind, context)
    finally:
        context._active.discard(key)


def _compare_structures(
    source: Any,
    target: Any,
    source_kind: TypeKind,
    target_kind: TypeKind,
    context: EquivalenceContext,
) -> bool:
    if isinstance(source, StructurallyComparable):
        return bool(source.__equivalent_to__(target, context))
    if source_kind in _ORDERED_KINDS and target_kind in _ORDERED_KINDS:
        return _compare_sequences(source, target, context)
    if source_kind is TypeKind.SET and target_kind is TypeKind.SET:
        return _compare_sets(source, target, context)
    if source_kind is TypeKind.MAPPING and target_kind is TypeKind.MAPPING:
        return _compare_mappings(source, target, context)
    if source_kind is TypeKind.COMPOSITE and target_kind is TypeKind.COMPOSITE:
        return _compare_composites(source, target, context)
    return bool(source == target)


def _compare_sequences(source: Any, target: Any, context: EquivalenceContext) -> bool:
    if not context.counts_match(len(source), len(target)):
        return False
    return all(context.compare(s, t) for s, t in zip(source, target, strict=False))


def _compare_sets(source: Any, target: Any, context: EquivalenceContext) -> bool:
    if not context.counts_match(len(source), len(target)):
        return False
    return all(any(context.compare(item, candidate) for candidate in target) for item in source)


def _compare_mappings(
    source: Mapping[Any, Any], target: Mapping[Any, Any], context: EquivalenceContext
) -> bool:
    if not context.counts_match(len(source), len(target)):
        return False
    for key, value in source.items():
        if key not in target or not context.compare(value, target[key]):
            return False
    return True


def _compare_members(
    source_members: dict[str, Any], target_members: dict[str, Any], context: EquivalenceContext
) -> bool:
    for name, value in source_members.items():
        if not context.compare(value, target_members.get(name)):
            return False
    if not context.policy.ignore_null_source:
        # Members only the target has must be unset
        for name, value in target_members.items():
            if name not in source_members and not context.compare(None, value):
                return False
    return True


def _has_members(obj: Any) -> bool:
    return bool(property_names(type(obj))) or bool(instance_fields(obj))


def _compare_composites(source: Any, target: Any, context: EquivalenceContext) -> bool:
    if not _has_members(source) and not _has_members(target):
        # State lives outside __dict__, slots and properties (slice, re.Pattern, views)
        return bool(source == target)
    public_only = context.policy.public_only
    if not _compare_members(
        instance_properties(source, public_only),
        instance_properties(target, public_only),
        context,
    ):
        return False
    return _compare_members(
        instance_fields(source, public_only),
        instance_fields(target, public_only),
        context,
    )


def is_equivalent_to(
    source: Any,
    target: Any,
    ignore_null_source: bool = False,
    public_only: bool = False,
    *,
    policy: ComparisonPolicy | None = None,
) -> bool:
    """Check whether source holds the same data as target.

    Rules, first match wins: None handling, identity, scalar coercions
    (bool/text/integer, enum/value/name, datetime/ISO text, text rendering
    of other scalars), element-wise ordered comparison of sequences, member
    comparison of sets, key-wise comparison of mappings, member-wise
    comparison of objects (properties, then fields), and finally ``==``.

    The result is not always symmetric: ignore_null_source only relaxes the
    source side.

    Args:
        source: Object we are comparing.
        target: Object we are comparing to.
        ignore_null_source: Treat None values on the source side as
            unchanged/unspecified, and allow source collections to be
            shorter than the target's.
        public_only: Compare only public (non-underscore) members.
        policy: Full policy; overrides the two flags when given.

    Returns:
        True if the graphs are equivalent, otherwise False. Type mismatches
        yield False, never an exception.
    """
    if policy is None:
        policy = ComparisonPolicy(ignore_null_source=ignore_null_source, public_only=public_only)
    return EquivalenceContext(policy).compare(source, target)
