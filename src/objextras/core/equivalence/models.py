"""Equivalence models: comparison policy and the explicit comparison hook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from objextras.core.equivalence.core import EquivalenceContext


@dataclass(slots=True, frozen=True)
class ComparisonPolicy:
    """How two object graphs are compared.

    Attributes:
        ignore_null_source: None on the source side means "unspecified" and
            matches anything; a shorter source collection matches a longer
            target as long as the shared part matches.
        public_only: Compare only members whose names do not start with an
            underscore.
    """

    ignore_null_source: bool = False
    public_only: bool = False


@runtime_checkable
class StructurallyComparable(Protocol):
    """Explicit equivalence hook, used instead of the member walk.

    ``context.compare(a, b)`` compares children under the same policy and
    cycle guard.
    """

    def __equivalent_to__(self, other: Any, context: EquivalenceContext) -> bool: ...
