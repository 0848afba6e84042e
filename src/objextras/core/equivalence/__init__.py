"""Structural equivalence: policy, protocol, coercion rules and walker."""

from objextras.core.equivalence.core import EquivalenceContext, is_equivalent_to
from objextras.core.equivalence.models import ComparisonPolicy, StructurallyComparable
from objextras.core.equivalence.operations import COERCION_RULES, coerce

__all__ = [
    # Models
    "ComparisonPolicy",
    "StructurallyComparable",
    # Operations
    "COERCION_RULES",
    "coerce",
    # Core
    "EquivalenceContext",
    "is_equivalent_to",
]
