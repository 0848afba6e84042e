"""Core functionalities: type classification and the object graph walkers.

Architecture Note:
    core/ contains pure, stateless walkers. Per-call state (the clone
    identity map, the equivalence cycle guard) lives in context objects
    created for each top-level call and discarded on return.
    For helpers built on top of the walkers, see extensions/ and
    serialization/.
"""

from objextras.core.classifier import TypeKind, classify, is_leaf, is_simple
from objextras.core.clone import CloneContext, Cloneable, clone
from objextras.core.equivalence import (
    ComparisonPolicy,
    EquivalenceContext,
    StructurallyComparable,
    is_equivalent_to,
)

__all__ = [
    # Classifier
    "TypeKind",
    "classify",
    "is_leaf",
    "is_simple",
    # Clone
    "Cloneable",
    "CloneContext",
    "clone",
    # Equivalence
    "ComparisonPolicy",
    "EquivalenceContext",
    "StructurallyComparable",
    "is_equivalent_to",
]
